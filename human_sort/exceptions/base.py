"""Root of the Human Sort exception hierarchy."""


class HumanSortException(Exception):
    """Common parent of every error raised by human_sort.

    Comparing and sorting strings never raises. These errors come from
    misuse: extracting a digit run where there is none, or building a
    configuration with unsupported values.
    """
