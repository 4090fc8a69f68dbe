import pytest

from lenna.image import Image
from lenna.plugins.base import (
    NULL_UID,
    EditPlugin,
    InputPlugin,
    OutputPlugin,
    Plugin,
    PluginKind,
)

UID = "{4b122e95-6fed-4627-8254-5925fab3178f}"


class ListInput(InputPlugin):
    name = "listinput"
    title = "List Input"
    version = "1.0"

    def __init__(self, uid=None, images=()):
        super().__init__(uid)
        self.images = list(images)
        self.position = 0

    def init(self):
        self.position = 0

    def has_next(self):
        return self.position < len(self.images)

    def next(self):
        image = self.images[self.position]
        self.position += 1
        return image

    def progress(self):
        return self.position * 100 // max(len(self.images), 1)


class Renamer(EditPlugin):
    name = "renamer"

    def edit(self, image):
        image.name = image.name.upper()


class Collector(OutputPlugin):
    def __init__(self, uid=None):
        super().__init__(uid)
        self.seen = []
        self.done = False

    def out(self, image):
        self.seen.append(image)

    def finish(self):
        self.done = True


class EditAndOutput(EditPlugin, OutputPlugin):
    def edit(self, image):
        pass

    def out(self, image):
        pass

    def finish(self):
        pass


def test_default_uid_is_null():
    plugin = Renamer()
    assert plugin.uid == NULL_UID
    assert plugin.name == "renamer"
    assert Collector().name == "unknown"
    assert Plugin.kinds(plugin) == {PluginKind.EDIT}


def test_uid_normalised():
    plugin = Renamer(UID.upper())
    assert plugin.uid == UID
    plugin.uid = UID.strip("{}")
    assert plugin.uid == UID
    assert Plugin.create_instance(plugin, UID.upper()).uid == UID


def test_invalid_uid_becomes_null():
    plugin = Renamer(UID)
    plugin.uid = "not-a-uid"
    assert plugin.uid == NULL_UID
    assert Plugin.kinds(plugin) == {PluginKind.EDIT}


def test_create_instance():
    template = Renamer()
    instance = Plugin.create_instance(template, UID)
    assert instance is not template
    assert type(instance) is Renamer
    assert instance.uid == UID
    assert template.uid == NULL_UID


def test_kinds():
    assert Plugin.kinds(ListInput()) == {PluginKind.INPUT}
    assert Plugin.kinds(Renamer()) == {PluginKind.EDIT}
    assert Plugin.kinds(Collector()) == {PluginKind.OUTPUT}
    assert Plugin.kinds(EditAndOutput()) == {PluginKind.EDIT, PluginKind.OUTPUT}


def test_abstract_classes_cannot_be_instantiated():
    with pytest.raises(TypeError):
        InputPlugin()
    with pytest.raises(TypeError):
        EditPlugin()
    with pytest.raises(TypeError):
        OutputPlugin()


def test_input_iteration_and_progress():
    images = [Image(name="a"), Image(name="b")]
    source = ListInput(images=images)
    source.init()
    assert list(source) == images
    assert source.has_next() is False
    assert source.progress() == 100


def test_edit_and_output_flow():
    image = Image(name="pic")
    Renamer().edit(image)
    sink = Collector()
    sink.out(image)
    sink.finish()
    assert sink.seen == [image]
    assert image.name == "PIC"
    assert sink.done is True


def test_plugin_is_abstract_base():
    assert issubclass(InputPlugin, Plugin)
    sink = Collector()
    assert isinstance(sink, Plugin)
    assert not isinstance(sink, EditPlugin)
    assert Plugin.kinds(sink) == {PluginKind.OUTPUT}