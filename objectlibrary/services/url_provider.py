"""
Builds service URLs from a base, path components and query parameters.

    url("https://pokeapi.co/api/v2", ["pokemon"], {"offset": "0", "limit": "964"})
    -> "https://pokeapi.co/api/v2/pokemon?offset=0&limit=964"
"""

from typing import Iterable, Mapping
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

# Characters kept verbatim inside an appended path component
_PATH_SAFE = "/:@!$&'()*+,;="


def url(base_url: str, path_components: Iterable[str], parameters: Mapping[str, str]) -> str:
    """
    Append path_components to base_url in order, then replace its query
    string with parameters. Existing query items are dropped, not merged.
    An empty parameters mapping leaves the URL without a query.
    """
    return with_parameters(with_path_components(base_url, path_components), parameters)


def with_path_components(base_url: str, path_components: Iterable[str]) -> str:
    scheme, netloc, path, query, fragment = urlsplit(base_url)
    for component in path_components:
        path = f"{path.rstrip('/')}/{quote(str(component), safe=_PATH_SAFE)}"
    return urlunsplit((scheme, netloc, path, query, fragment))


def with_parameters(base_url: str, parameters: Mapping[str, str]) -> str:
    scheme, netloc, path, _, fragment = urlsplit(base_url)
    query = urlencode([(str(k), str(v)) for k, v in parameters.items()], quote_via=quote)
    return urlunsplit((scheme, netloc, path, query, fragment))
