"""Resolution watching and font DPI switching for Xfce."""

from .applier import DpiApplier
from .detector import DisplayDetector
from .errors import (
    ApplyFailureError,
    AutoDpiError,
    AutostartError,
    ConfigCreateError,
    ConfigFormatError,
    UnmappedResolutionError,
)
from .mapping import DpiConfigStore, ResolutionEntry, ResolutionMapping
from .watcher import ResolutionWatcher

__all__ = [
    'ApplyFailureError',
    'AutoDpiError',
    'AutostartError',
    'ConfigCreateError',
    'ConfigFormatError',
    'DisplayDetector',
    'DpiApplier',
    'DpiConfigStore',
    'ResolutionEntry',
    'ResolutionMapping',
    'ResolutionWatcher',
    'UnmappedResolutionError',
]
