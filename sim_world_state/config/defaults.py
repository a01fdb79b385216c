# Poses from which the robots enter the pitch (global field coordinates, mm).
# Each entry: (player number, (x, y) position, (x, y) point the robot is turned towards)
DEFAULT_SETUP_POSES = [
    (1, (-4500.0, -3000.0), (-4500.0, 0.0)),
    (2, (-3500.0, -3000.0), (-3500.0, 0.0)),
    (3, (-2500.0, -3000.0), (-2500.0, 0.0)),
    (4, (-1500.0, -3000.0), (-1500.0, 0.0)),
    (5, (-500.0, -3000.0), (-500.0, 0.0)),
    (6, (-4000.0, 3000.0), (-4000.0, 0.0)),
    (7, (-3000.0, 3000.0), (-3000.0, 0.0)),
]
