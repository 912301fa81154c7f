"""Default parameters for the planar arm.

Lengths are in an arbitrary linear unit (pixels in the viewer).
Angles at every public boundary are degrees.
"""

# --- Link lengths ---
DEFAULT_L1 = 150.0   # shoulder to elbow
DEFAULT_L2 = 100.0   # elbow to end-effector

# --- Tolerances ---
REACH_EPSILON = 1e-6        # slack on workspace boundary comparisons
IK_VERIFY_TOLERANCE = 0.1   # max FK(IK(target)) error before a solution is suspect

# --- Trajectory ---
TRAJECTORY_CAPACITY = 1000  # end-effector samples kept, oldest dropped first
