"""Core (UI-agnostic) cipher wheel logic.

This package contains:
- the fixed alphabet and shift/mode/ring normalization
- caller state normalization (raw dict -> WheelState)
- the shift cipher text transform
- wheel geometry (letter positions, pairings, connectors)
- table builders (pandas) and chart helpers (Altair -> Vega-Lite spec dict)
- the wheel view payload (JSON-serializable)
"""
