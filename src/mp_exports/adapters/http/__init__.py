"""HTTP adapter – async HTTP client and the exports API producer."""
from mp_exports.adapters.http.client import HttpClient, HttpxHttpClient
from mp_exports.adapters.http.exports_api import HttpExportProducer

__all__ = ["HttpClient", "HttpExportProducer", "HttpxHttpClient"]
