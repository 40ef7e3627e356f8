NOW = 1_700_000_000_000
ONE_DAY_MS = 86_400_000
