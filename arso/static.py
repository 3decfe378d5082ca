"""Static file serving with optional directory listings."""
import html
import os
import stat

from starlette.exceptions import HTTPException
from starlette.responses import HTMLResponse, Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope


def render_listing(url_path: str, directory: str) -> str:
    """Render a minimal HTML index of a directory's entries."""
    if not url_path.endswith("/"):
        url_path += "/"
    items = []
    for name in sorted(os.listdir(directory)):
        if os.path.isdir(os.path.join(directory, name)):
            name += "/"
        escaped = html.escape(name)
        items.append(f'<a href="{html.escape(url_path + name, quote=True)}">{escaped}</a>')
    title = html.escape(url_path)
    return (
        f"<!DOCTYPE html>\n<html><head><title>Index of {title}</title></head><body>\n"
        f"<h1>Index of {title}</h1>\n<pre>\n" + "\n".join(items) + "\n</pre>\n</body></html>\n"
    )


class ListingStaticFiles(StaticFiles):
    """StaticFiles that lists directories without an index.html."""

    def __init__(self, *args, listing: bool = True, **kwargs):
        super().__init__(*args, **kwargs)
        self.listing = listing

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            return await super().get_response(path, scope)
        except HTTPException as exc:
            if exc.status_code != 404 or not self.listing:
                raise
            full_path, stat_result = self.lookup_path(path)
            if stat_result is None or not stat.S_ISDIR(stat_result.st_mode):
                raise
            return HTMLResponse(render_listing(scope["path"], full_path))
