# cclevels utilities
from .logging import log, logWarning, logError, logDebug, init_logging, close_logging, is_initialized, print_summary, get_counts
from .binary import DataStream, encode_rle, decode_rle
