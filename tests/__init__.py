NOWRUZ_1403_UTC = 1710892800  # 2024-03-20 00:00:00 UTC
