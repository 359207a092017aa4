"""Page fetching and screenshots through a locally installed headless browser."""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_TIMEOUT_SECONDS = 30
_MAX_TEXT_CHARS = 50000
_HEADLESS_ARGS = ("--headless=new", "--disable-gpu", "--no-sandbox")

_AUTODETECT = object()


class BrowserError(RuntimeError):
    """Raised when the browser is missing, times out or fails."""


@dataclass(frozen=True)
class PageContent:
    """Text extracted from a fetched page."""

    url: str
    title: str
    text_content: str
    status: str


def _candidates() -> list[str]:
    if sys.platform == "win32":
        return [
            r"C:\Program Files\Google\Chrome\Application\chrome.exe",
            r"C:\Program Files (x86)\Google\Chrome\Application\chrome.exe",
            r"C:\Program Files (x86)\Microsoft\Edge\Application\msedge.exe",
            r"C:\Program Files\Microsoft\Edge\Application\msedge.exe",
        ]
    if sys.platform == "darwin":
        return [
            "/Applications/Google Chrome.app/Contents/MacOS/Google Chrome",
            "/Applications/Microsoft Edge.app/Contents/MacOS/Microsoft Edge",
            "/Applications/Chromium.app/Contents/MacOS/Chromium",
        ]
    return [
        "google-chrome",
        "google-chrome-stable",
        "chromium-browser",
        "chromium",
        "microsoft-edge",
    ]


def detect_chrome() -> str | None:
    """Return the path or command name of an installed Chrome/Edge, if any."""
    for path in _candidates():
        if Path(path).exists():
            return path
    if sys.platform != "win32":
        for name in ("google-chrome", "chromium-browser", "chromium"):
            if shutil.which(name):
                return name
    return None


def extract_title(html: str) -> str | None:
    """Return the stripped text of the first <title> element, if present."""
    lower = html.lower()
    start = lower.find("<title>")
    if start < 0:
        return None
    end = lower.find("</title>", start)
    if end < 0:
        return None
    return html[start + len("<title>"):end].strip()


def extract_text_from_html(html: str) -> str:
    """Strip tags, scripts and styles; return non-blank trimmed lines."""
    pieces: list[str] = []
    in_tag = in_script = in_style = False

    for i, ch in enumerate(html):
        if not in_tag and ch == "<":
            in_tag = True
            rest = html[i:i + 10].lower()
            if rest.startswith("<script"):
                in_script = True
            if rest.startswith("<style"):
                in_style = True
            if rest.startswith("</script"):
                in_script = False
            if rest.startswith("</style"):
                in_style = False
        elif in_tag and ch == ">":
            in_tag = False
        elif not in_tag and not in_script and not in_style:
            pieces.append(ch)

    lines = (line.strip() for line in "".join(pieces).split("\n"))
    return "\n".join(line for line in lines if line)


class BrowserAutomation:
    """Drives a headless Chrome/Edge binary from the command line."""

    def __init__(self, chrome_path: str | None | object = _AUTODETECT) -> None:
        if chrome_path is _AUTODETECT:
            chrome_path = detect_chrome()
            if chrome_path:
                logger.info("Chrome detected at: %s", chrome_path)
            else:
                logger.warning("Chrome/Edge not found, browser automation unavailable")
        self.chrome_path: str | None = chrome_path  # type: ignore[assignment]

    def is_available(self) -> bool:
        """True when a browser binary is known."""
        return self.chrome_path is not None

    def _require_chrome(self) -> str:
        if self.chrome_path is None:
            raise BrowserError("Chrome/Edge not found")
        return self.chrome_path

    def fetch_page_text(self, url: str) -> PageContent:
        """Load a page with --dump-dom and return its title and visible text."""
        chrome = self._require_chrome()
        try:
            completed = subprocess.run(
                [chrome, *_HEADLESS_ARGS, "--dump-dom", url],
                capture_output=True,
                timeout=_TIMEOUT_SECONDS,
            )
        except subprocess.TimeoutExpired as exc:
            raise BrowserError(f"Chrome timed out after {_TIMEOUT_SECONDS}s") from exc

        html = completed.stdout.decode("utf-8", errors="replace")
        text = extract_text_from_html(html)
        if len(text) > _MAX_TEXT_CHARS:
            text = f"{text[:_MAX_TEXT_CHARS]}...\n[内容截断]"
        return PageContent(
            url=url,
            title=extract_title(html) or "",
            text_content=text,
            status="ok" if completed.returncode == 0 else "error",
        )

    def screenshot(self, url: str, output_path: str) -> str:
        """Save a 1280x720 screenshot of a page and return the output path."""
        chrome = self._require_chrome()
        try:
            completed = subprocess.run(
                [
                    chrome,
                    *_HEADLESS_ARGS,
                    f"--screenshot={output_path}",
                    "--window-size=1280,720",
                    url,
                ],
                capture_output=True,
                timeout=_TIMEOUT_SECONDS,
            )
        except subprocess.TimeoutExpired as exc:
            raise BrowserError("Chrome screenshot timed out") from exc

        if completed.returncode != 0:
            err = completed.stderr.decode("utf-8", errors="replace")
            raise BrowserError(f"Screenshot failed: {err}")
        return output_path