"""Test configuration and fixtures."""

import json
import pytest

from guidereader.store import TextDirectoryStore
from guidereader.segmenters.sentence import SentenceSegmenter


GUGONG_TEXT = (
    "各位游客，欢迎来到故宫。故宫始建于1406年，占地约72万平方米！\r\n"
    "太和殿高35.05米。大家请跟我来？\r\n"
)


@pytest.fixture
def segmenter():
    """Provide the default sentence segmenter."""
    return SentenceSegmenter()


@pytest.fixture
def sample_catalog_data():
    """Provide catalog data with one invalid item per rule."""
    return {
        "list": [
            {"name": "故宫", "file": "gugong.txt"},
            {"name": "长城", "file": "changcheng.TXT"},
            {"name": "空白", "file": "blank.txt"},
            {"name": "", "file": "noname.txt"},
            {"name": "图片", "file": "photo.jpg"},
            {"name": "缺文件"},
            "not-an-object",
        ]
    }


@pytest.fixture
def text_dir(tmp_path, sample_catalog_data):
    """Provide a text directory with a catalog and guide files."""
    (tmp_path / "list.json").write_text(
        json.dumps(sample_catalog_data, ensure_ascii=False), encoding="utf-8")
    (tmp_path / "gugong.txt").write_text(GUGONG_TEXT, encoding="utf-8")
    (tmp_path / "changcheng.TXT").write_text("不到长城非好汉。\n长城全长约21196.18千米。",
                                             encoding="utf-8")
    (tmp_path / "blank.txt").write_text("  \n\n ", encoding="utf-8")
    return tmp_path


@pytest.fixture
def store(text_dir):
    """Provide a store over the sample text directory."""
    return TextDirectoryStore(text_dir)


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""

    def __init__(self):
        self.messages = []

    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))

    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))

    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))

    def names(self, level=None):
        return [m for lvl, m, _ in self.messages if level is None or lvl == level]


class SimpleTestMeter:
    """Simple meter for testing that captures counters and observations."""

    def __init__(self):
        self.counters = {}
        self.observations = []

    def inc(self, name: str, amount: int = 1, **tags):
        self.counters[name] = self.counters.get(name, 0) + amount

    def observe(self, name: str, value: float, **tags):
        self.observations.append((name, value, tags))


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def test_meter():
    """Provide a test meter that captures metrics."""
    return SimpleTestMeter()
