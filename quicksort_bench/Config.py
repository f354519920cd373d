SIZES = (1000, 2000, 5000)
PATTERNS = ("random", "sorted", "reversed", "fewUnique", "triangular")
DEFAULT_METHODS = ("Lomuto Last Pivot", "Three-Way Median Random Pivot", "Dual Pivot")

# None seeds from the clock once per process
SEED = None

# worst-case recursion depth of a driver equals the range size
MAX_SIZE = 50_000
RECURSION_HEADROOM = 200

FEW_UNIQUE_VALUES = 5

VALIDATE = True
REPORT_VALUES = ("comparisons", "swaps", "memory_usage", "execution_time")
