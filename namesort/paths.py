import logging

logger = logging.getLogger("namesort")

DEFAULT_OUTPUT_PATH = "sorted-names-list.txt"
