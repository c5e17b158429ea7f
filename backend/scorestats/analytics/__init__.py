"""ScoreStats Analytics Engine.

Pure, stateless calculators over a score collection:
- types.py: Report dataclasses + Ok/Undefined tagged ratios
- descriptive.py: Population mean/median/variance/CV
- gaussian.py: Lazy 51-point normal density curve
- histogram.py: 10-bin frequency histogram
- trend.py: Per-user improvement signal
- engine.py: Boundary validation + report orchestration
"""
