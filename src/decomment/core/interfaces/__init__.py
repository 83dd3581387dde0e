from .classifier import FileClassifierProtocol
from .fs import StorageProtocol, WalkerProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .text import StripperProtocol

__all__ = [
    'FileClassifierProtocol',
    'StorageProtocol',
    'WalkerProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'StripperProtocol',
]
