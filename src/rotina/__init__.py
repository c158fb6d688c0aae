"""
rotina core package.

This package currently provides:
- Calendar-date and clock-time helpers for the routine diary (`rotina.utils.time`)
- Day-period windows that gate routine availability (`rotina.utils.day_period`)
- A minimal Typer-based CLI (`rotina.cli`)

Configuration:
- Shared, project-wide constants (locale, labels, display patterns) live in
  `rotina.global_config`.
"""
