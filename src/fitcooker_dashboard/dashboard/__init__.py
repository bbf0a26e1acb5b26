"""
Dashboard layer (FitCooker)

  - DashboardComposer: concurrent section reads -> one DashboardViewModel
  - DashboardSession: viewing-user identity, section flags, stale-result guard

The composer only depends on the DashboardStore protocol, so tests and other
backends can inject their own store.
"""
