"""
Ranking layer (FitCooker dashboard)

Small, deterministic selectors over already-normalized records:
  - featured chefs (effective rating, then followers)
  - popular recipes (rating threshold, top N)
  - new-user classification (registration window)

No I/O happens here; the composer feeds these functions.
"""
