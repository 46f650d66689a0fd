"""
mp_exports – asynchronous export-job orchestration.

Import path convention::

    from mp_exports.application.export import ExportRequest, ExportService
    from mp_exports.adapters.http import HttpExportProducer
    from mp_exports.kernel.errors import RemoteError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
