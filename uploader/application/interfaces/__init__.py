"""Application interfaces (ports): repository, storage, and upload source protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from uploader.infrastructure or uploader.api.
"""

from uploader.application.interfaces.repositories import IFileRecordRepository
from uploader.application.interfaces.sources import IByteSink, IUploadSource
from uploader.application.interfaces.storage import IStorageBackend

__all__ = [
    "IByteSink",
    "IFileRecordRepository",
    "IStorageBackend",
    "IUploadSource",
]
