# Run identifier (used in outputs/ metadata)
RUN_NAMESPACE = "shrinkage_estimate_v1"

# Input format: "<expected> <actual>", one record per line, exactly one space.
FIELD_SEPARATOR = " "
FIELDS_PER_LINE = 2

# Report format
REPORT_DECIMALS = 4
REPORT_TEMPLATE = "Shrinkage: {shrinkage}, Adjustment: {adjustment}, Simulated adjustment {simulated_adjustment}"

# Packages recorded in run metadata
TRACKED_PACKAGES = ["numpy", "pandas", "matplotlib"]
