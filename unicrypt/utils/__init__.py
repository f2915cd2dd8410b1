from .random_gen import SecureRandom
from .log_setup  import setup_logging

__all__ = ["SecureRandom", "setup_logging"]
