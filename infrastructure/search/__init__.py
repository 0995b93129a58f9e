from infrastructure.search.rapidapi_search_client import RapidApiSearchClient, RapidApiSearchConfig

__all__ = ["RapidApiSearchClient", "RapidApiSearchConfig"]
