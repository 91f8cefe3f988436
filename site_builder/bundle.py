"""Package a GeneratedSite for download: a folder of files or a zip archive."""

import io
import logging
import re
import zipfile
from pathlib import Path

from .models import GeneratedSite

logger = logging.getLogger(__name__)

# Fixed entry timestamp so the same site always zips to the same bytes.
_ZIP_DATE = (1980, 1, 1, 0, 0, 0)


def site_slug(name: str) -> str:
    """'Green Valley Cafe' -> 'green-valley-cafe'."""
    slug = re.sub(r"\s+", "-", name.strip().lower())
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    slug = re.sub(r"-{2,}", "-", slug).strip("-")
    return slug or "site"


def archive_name(name: str) -> str:
    return f"{site_slug(name)}-website.zip"


def build_archive(site: GeneratedSite) -> bytes:
    """Zip index.html, style.css and script.js into an in-memory archive."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for filename, content in site.files().items():
            info = zipfile.ZipInfo(filename, date_time=_ZIP_DATE)
            info.compress_type = zipfile.ZIP_DEFLATED
            info.external_attr = 0o644 << 16
            zf.writestr(info, content.encode("utf-8"))
    return buffer.getvalue()


def write_site(site: GeneratedSite, directory: Path) -> list[Path]:
    """Write the three files into directory (created if missing)."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    written = []
    for filename, content in site.files().items():
        path = directory / filename
        path.write_text(content, encoding="utf-8")
        written.append(path)

    logger.info("Wrote %d files to %s", len(written), directory)
    return written
