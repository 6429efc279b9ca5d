import pytest

from lessonlab.i18n.sources import StaticBundleSource
from lessonlab.i18n.store import TranslationStore
from lessonlab.i18n.translate import Translator

LOCALES = ["en", "nl"]

EN_BUNDLE = {
    "shared": {
        "en": {
            "next": "Next",
            "greeting": "Hello",
            "link": 'before <Link href="https://x">label</Link> after',
            "only_en": "Only in English",
        },
    },
    "chapter_one": {
        "en": {
            "intro": {
                "title": "Genesis",
                "tip": 'Say <Tooltip content="shared.greeting">hi</Tooltip> now',
            },
        },
    },
}

NL_BUNDLE = {
    "shared": {
        "nl": {
            "next": "Volgende",
            "greeting": "Hallo",
            "link": 'voor <Link href="https://x/nl">label</Link> na',
            "empty": "",
        },
    },
}


@pytest.fixture
def source():
    return StaticBundleSource({"en": EN_BUNDLE, "nl": NL_BUNDLE})


@pytest.fixture
def store(source):
    return TranslationStore(source, LOCALES, "en")


@pytest.fixture
def translator(store):
    return Translator(store)
