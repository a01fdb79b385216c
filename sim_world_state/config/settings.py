### TEAMS ###
ROBOTS_PER_TEAM = 7  # player numbers 1..7 are first team, 8..14 second team

### SCENE ###
SCENE_GROUP_ROBOTS = "RoboCup.robots"
SCENE_GROUP_EXTRAS = "RoboCup.extras"
PLAYER_NAME_PREFIX_LENGTH = 5  # length of "robot" in "RoboCup.robots.robot3"

### UNITS ###
MM_PER_M = 1000.0
MS_PER_S = 1000.0

### BALL ###
FLAT_BALL_HEIGHT_MM = 50.0  # ball centre height reported by the 2D backend
CURVE_STDDEV_PER_SECOND = 0.015  # rad, scaled by the sampling interval
BALL_FRICTION_DECELERATION = 0.3  # m/s^2, applied by the 2D backend only

### SIMULATION ###
SIM_STEP_LENGTH_MS = 10  # length of one physics step

### ROBOTS ###
UPRIGHT_MIN_Z_AXIS_COMPONENT = 0.5  # body z-axis tilted more than 60 degrees counts as fallen
