from .swapi_client import FetchResult, Record, SwapiClient, local_id_from_url

__all__ = [
    "FetchResult",
    "Record",
    "SwapiClient",
    "local_id_from_url",
]
