# faviconbuddy

A Python library for adding favicons to a bookmarks HTML file as
exported by web browsers. Every bookmark whose site icon can be fetched
gets an `ICON` attribute holding the icon as a `data:` URI, so a browser
importing the resulting file shows the icons at once.

## Installing

```
pip install faviconbuddy
```

## Processing a bookmarks file

`faviconbuddy.process.process_bookmarks` is a coroutine that reads the
input file, looks up each bookmark's domain through the configured
favicon service and writes the result to the output path:

```python
import asyncio
from faviconbuddy.process import process_bookmarks
from faviconbuddy.utils import LogBuffer, Progress, generate_output_filename

log = LogBuffer()
progress = Progress()
output = generate_output_filename("bookmarks.html")
asyncio.run(process_bookmarks("bookmarks.html", output, log, None, progress))
print(log.text())
```

`generate_output_filename` places the result beside the input as
`<name>-with-favicons--YYYY-MM-DD-HHMMSS.<ext>`. Passing a
`threading.Event` as the fourth argument lets another thread stop the
run; when stopped, the output file is not written but the favicons
fetched so far stay in the cache.

`faviconbuddy.state.AppState` bundles the log, progress, stop event and
configuration, and runs the job on a background thread:
`select_file`, `start_processing` (returns the output path),
`stop_processing`, `wait`, `clear_log` and `progress_fraction`.

## Cache

Favicons are cached per domain in `favicon_cache.json`
(`faviconbuddy.cache`). Domains whose fetch failed are stored as
failures and are not retried. `faviconbuddy.import_export` exports the
cache (only domains with an icon) and merges an exported cache back in,
and likewise exports and imports the configuration.

## Configuration

`faviconbuddy.config.AppConfig` holds the list of favicon services and
the chosen language, stored as `config.json`. A service is a URL
template in which `{domain}` is replaced by the bookmark's host name;
Google and DuckDuckGo are provided by default. `AppConfig.load()` falls
back to the defaults (and saves them) when the file is missing or
invalid. Configuration and cache live in `~/.config/favicon-buddy`
(under `USERPROFILE` on Windows).

## Messages and languages

`faviconbuddy.i18n` loads message catalogues from
`locales/<locale>.yml` (nested YAML keys become dotted keys,
`%{name}` marks a placeholder) for `en` and `zh-CN`, picks a locale
from `LANGUAGE`, `LC_ALL`, `LC_MESSAGES` or `LANG`, and falls back to
the key itself when a message is missing. No catalogue files are
included in the package.

## Other helpers

- `faviconbuddy.fetch` downloads an icon and returns it as a `data:`
  URI, synchronously or asynchronously.
- `faviconbuddy.logview` splits log lines into coloured segments for
  display.
- `faviconbuddy.fonts` lists the CJK and emoji font files a display
  would try on each platform.

## What is not included

There is no graphical window, settings dialog or command to start the
tool from a shell; the package provides the processing, storage and
state these would be built on.

## Running the tests

```
pip install "faviconbuddy[test]"
pytest
```