"""Access tokens resource client.

The server only accepts basic authentication on these endpoints, and scopes
them to the authenticated user.
"""

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from gitconverge.types.response import Page
from gitconverge.types.tokens import AccessToken, CreateAccessTokenOption, ListOptions

if TYPE_CHECKING:
    from gitconverge.transport import HTTPTransport


def _parse_token(data: dict[str, Any]) -> AccessToken:
    return AccessToken(
        id=data["id"],
        name=data["name"],
        scopes=list(data.get("scopes") or []),
        token=data.get("sha1") or "",
        token_last_eight=data.get("token_last_eight") or "",
    )


class TokensClient:
    """Client for access token operations of the authenticated user."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def _path(self) -> str:
        return f"/users/{quote(self.transport.username, safe='')}/tokens"

    def list(self, options: ListOptions | None = None) -> Page[AccessToken]:
        """
        List one page of access tokens.

        The returned page's ``next_page`` is None on the last page.
        """
        options = options or ListOptions()
        data, response = self.transport.request("GET", self._path(), params=options.to_params())
        items = [_parse_token(t) for t in data or []]

        # Servers that omit the Link header still report X-Total-Count
        if response.next_page is None and response.total_count is not None:
            if options.page * options.page_size < response.total_count and items:
                response.next_page = options.page + 1

        return Page(items=items, response=response)

    def create(self, option: CreateAccessTokenOption) -> AccessToken:
        """
        Create an access token.

        The returned token carries the secret value; it is never returned again.
        """
        data, _ = self.transport.request("POST", self._path(), body=option.to_payload())
        return _parse_token(data)

    def delete(self, token_id: int) -> None:
        """
        Delete an access token by its numeric id.

        Raises:
            NotFoundError: If no token has that id
        """
        self.transport.request("DELETE", f"{self._path()}/{token_id}")
