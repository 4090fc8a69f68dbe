# lenna

Batch image processing built around plugins. Images come from **input**
plugins, pass through a chain of **edit** plugins and end up in **output**
plugins. Which plugin instances are active, and in what order, is kept in a
JSON settings file so that a configured pipeline can be run again later.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

```
lenna
```

`lenna` loads the plugins registered in the running process, activates the
ones stored in the settings and feeds every image from the active input
plugins through the active edit and output plugins. At the end it prints the
title and the last reported progress, for example `lenna 0.1.0: progress 100%`,
and writes the active plugins back to the settings.

When the settings name no plugins, the instances `filechooser`, `resize` and
`savefile` are activated if plugins of those names are known; unknown names
are only logged as warnings (to standard error).

Options:

- `--settings FILE` – use this settings file instead of the default one in
  the user configuration directory.
- `--no-discover` – do not pick up registered plugins.
- `--activate NAME` – activate a new instance of the plugin `NAME` (or
  `"NAME VERSION"`); may be repeated, and the instances are placed first in
  the given order. An unknown name ends the command with exit status 2.
- `--list` – print the active plugins of each stage (`input:`, `edit:`,
  `output:`) and exit without processing.
- `--version` – print the version.

## Writing plugins

Subclass one of the base classes in `lenna.plugins.base` and set the
descriptive class attributes (`name`, `title`, `version`, `author`,
`description`, `icon`). A plugin class must be constructible without
arguments, because active instances are made with `Plugin.create_instance(uid)`.

```python
import numpy as np

from lenna.application import Settings
from lenna.image import Image
from lenna.pipeline import Worker
from lenna.plugins.base import EditPlugin, InputPlugin, OutputPlugin
from lenna.plugins.loader import PluginLoader

collected = []


class Noise(InputPlugin):
    name = "noise"
    title = "Noise"
    version = "1.0"

    def init(self):
        self.left = 3

    def has_next(self):
        return self.left > 0

    def next(self):
        self.left -= 1
        pixels = np.random.randint(0, 256, (4, 4), dtype=np.uint8)
        return Image(pixels, name=f"noise-{self.left}")

    def progress(self):
        return 100 - self.left * 100 // 3


class Invert(EditPlugin):
    name = "invert"
    title = "Invert"
    version = "1.0"

    def edit(self, image):
        image.data = 255 - image.data


class Collect(OutputPlugin):
    name = "collect"
    title = "Collect"
    version = "1.0"

    def out(self, image):
        collected.append(image)

    def finish(self):
        print(f"{len(collected)} images")


loader = PluginLoader(
    Settings(path="settings.json"),
    plugins=[Noise(), Invert(), Collect()],
    discover=False,
)
for name in ("noise", "invert", "collect"):
    loader.activate(None, name)

Worker(loader, on_progress=print).process()
loader.save_config()
```

To make a plugin available to `PluginLoader.discover()` (and so to the `lenna`
command), pass an instance or a class to
`lenna.plugins.loader.register_plugin`. The registry lives in the running
process only.

## Modules

- `lenna.logger` – `Logger` keeps every message per `MessageLevel` and in a
  combined `"Level: message"` history (`Logger.messages`), and calls listeners
  added with `Logger.connect`. `get_logger()` returns the shared logger and
  `reset_logger()` drops it. `LoggerHandler` is a `logging.Handler` that
  forwards debug, warning, error and critical records into a `Logger` and
  echoes them to a stream.
- `lenna.application` – `Settings` stores keys (grouped with `/`) in a JSON
  file; `Application` holds name, version, organization and directory;
  `configure()` and `current()` update and return the shared one.
- `lenna.image` – `Image` wraps a numpy array with a name, album and EXIF
  metadata: `Image.from_file`, `copy`, `convolve` (2-D kernel, mirrored
  borders, same depth), `to_pil` and `read_metadata`.
- `lenna.plugins.base` – `Plugin`, `InputPlugin`, `EditPlugin`,
  `OutputPlugin` and `PluginKind`. Plugin identifiers are braced UUIDs.
- `lenna.plugins.loader` – `PluginLoader` keeps the catalogue of plugins and
  the ordered lists of active instances: `activate`, `activate_plugin`,
  `activate_plugins`, `deactivate_plugin`, `deactivate_index`, `move_plugin`,
  `find_plugin`, `plugins`, `active_plugins`, `load_config` and
  `save_config`. `get_instance()` and `destroy_instance()` manage a shared
  loader.
- `lenna.pipeline` – `Worker` runs the pipeline, processing images in a
  thread pool and reporting progress from 0 to 100; `Worker.stop` ends it
  after the current image. `ImageProcessor` runs one image through the edit
  and output plugins; `Process` runs a worker on a background thread.
- `lenna.pluginconfig` – `PluginConfig` adds, removes and reorders active
  plugins (`add`, `remove`, `move_up`, `move_down`, `apply_catalog_order`);
  `describe_plugin` gives the texts shown for a plugin.
- `lenna.cli` – `Session` (start, stop, toggle, wait, `tabs`, `close_tab`) and
  the `main` function behind the `lenna` command.
- `lenna.tips` – `load_tips` reads `data/tips/tips_<locale>.txt` (one tip per
  line, English as fallback); `Tips` cycles through them and saves its
  position in the settings.
- `lenna.translation` – `Translation` lists the languages found in
  `i18n/*.json` catalogs (each naming its language under the key
  `"english"`) and stores the chosen one; `translate`, `locale` and
  `install_plugin_translation` look up and install catalogs.
- `lenna.about` – `load_document`, `version_label` and `fetch_online_version`.
- `lenna.logview` – `format_messages` and `render_log`, plain-text views of
  the log per level.

## What this package does not do

- It ships no plugins. Without plugins registered in the process, the `lenna`
  command finds nothing to activate and processes no images; the default
  names `filechooser`, `resize` and `savefile` only refer to plugins someone
  else must provide.
- It does not load plugins from files or installed distributions; discovery
  covers only what `register_plugin` was given.
- It has no graphical interface. Sessions, tips, about texts, the log view and
  plugin configuration are offered as Python objects and functions, and the
  command line runs or lists the pipeline.