# Common utilities
from maillic.common.crypto import CryptoAdapter as CryptoAdapter
from maillic.common.logging_utils import setup_logger as setup_logger
from maillic.common.mixins import Configurable as Configurable

__all__ = ["Configurable", "CryptoAdapter", "setup_logger"]
