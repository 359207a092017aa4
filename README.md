# autocrab

A small set of guarded tools for a desktop AI assistant. Each tool does one
job and refuses work that falls outside the limits it was configured with.

## Modules

- `autocrab.file_ops.FileOps(allowed_roots=())`: `read_file`, `write_file`,
  `list_directory` and `delete_file`, confined to a list of allowed root
  directories (an empty list allows every path). Paths starting with `~` are
  expanded by `FileOps.expand_path`. A path outside the roots raises
  `AccessDeniedError` (a `PermissionError`). `write_file` creates missing
  parent directories. `list_directory` returns `FileEntry` objects (`name`,
  `path`, `is_dir`, `size`), directories first, then sorted by name.
- `autocrab.shell.ShellExecutor(enabled, allowed_commands=())`: runs a command
  through `sh -c` (or `cmd /C` on Windows). With a non-empty allow-list, the
  first word of the command, stripped of any directory and a trailing `.exe`,
  must be on the list. `execute(command, working_dir=None)` returns a
  `ShellOutput` with `stdout`, `stderr` and `exit_code` (`-1` when the process
  was killed by a signal). Commands time out after 60 seconds, or 5 seconds
  for commands that look like `start ...` launches. Refusals and timeouts
  raise `ShellError`.
- `autocrab.web.WebRequester(enabled, allowed_domains=())`: HTTP GET and JSON
  POST over `httpx`, with a 30-second timeout and the user agent
  `AutoCrab/0.1`. Allowed domains are exact host names or `*.example.com`
  patterns, which match the bare domain and any sub-domain. `get` keeps at
  most 20 headers and truncates bodies longer than 50,000 characters;
  `post_json` returns status and body only. Both return a `WebResponse`
  (`status`, `body`, `headers`). Refused or unparsable URLs raise
  `WebAccessError`. The requester is a context manager; `close()` releases
  the HTTP client.
- `autocrab.browser`: `BrowserAutomation(chrome_path=...)` drives an installed
  Chrome or Edge in headless mode. With no argument it looks one up with
  `detect_chrome()`; passing `None` leaves it unavailable. `is_available()`
  says whether a browser is known. `fetch_page_text(url)` returns a
  `PageContent` (`url`, `title`, `text_content`, `status`) from the page's
  dumped DOM, with text cut at 50,000 characters. `screenshot(url,
  output_path)` saves a 1280x720 image and returns the path. Missing browser,
  30-second timeouts and failed screenshots raise `BrowserError`.
  `extract_title(html)` and `extract_text_from_html(html)` can be used on
  their own.
- `autocrab.ui_automation`: `UiNode` and `UiTreeSnapshot` describe a window's
  control tree and convert to and from plain dictionaries (`to_dict`,
  `from_dict`). `serialize_text()` renders the tree as an indented text
  outline, shortening names over 50 characters; `has_useful_elements()` is
  true when the tree has at least three nodes and more than 20% of them are
  named.

## Install

```
pip install autocrab
```

For the test suite:

```
pip install "autocrab[test]"
pytest
```

## Example

```python
from autocrab.file_ops import FileOps
from autocrab.shell import ShellExecutor
from autocrab.web import WebRequester

files = FileOps(["~/notes"])
files.write_file("~/notes/todo.txt", "buy milk\n")
print(files.read_file("~/notes/todo.txt"))
for entry in files.list_directory("~/notes"):
    print(entry.name, entry.is_dir, entry.size)

shell = ShellExecutor(True, ["echo", "ls"])
result = shell.execute("echo hello")
print(result.exit_code, result.stdout)

with WebRequester(True, ["*.example.com"]) as web:
    response = web.get("https://docs.example.com/page")
    print(response.status, response.body[:200])
```

```python
from autocrab.ui_automation import UiNode, UiTreeSnapshot

snapshot = UiTreeSnapshot(
    window_title="Editor",
    window_rect=(0, 0, 800, 600),
    tree=[UiNode(role="Button", name="Save", rect=(10, 10, 80, 24), states=["clickable"])],
)
print(snapshot.serialize_text())
```

## What it does not do

- There is no catalogue of tools and no export of tool descriptions as
  function-calling schemas; callers describe the tools to a model themselves.
- `autocrab.ui_automation` only holds and renders element trees. It does not
  read the controls of a live window, focus windows, or move the mouse and
  keyboard.
- There is no command-line program, server or user interface; the package is
  a library.