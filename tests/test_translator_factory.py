"""Tests for get_translator() factory."""

from __future__ import annotations

import pytest

from polyglot import constants
from polyglot.targets import SUPPORTED_TARGETS, get_translator
from polyglot.targets.csharp import CSharpTranslator
from polyglot.targets.go import GoTranslator
from polyglot.targets.javascript import JavaScriptTranslator
from polyglot.targets.php import PhpTranslator
from polyglot.translator import Translator


class TestGetTranslator:
    def test_go(self):
        assert isinstance(get_translator("go"), GoTranslator)

    def test_php(self):
        assert isinstance(get_translator("php"), PhpTranslator)

    def test_javascript(self):
        assert isinstance(get_translator("javascript"), JavaScriptTranslator)

    def test_csharp(self):
        assert isinstance(get_translator("csharp"), CSharpTranslator)

    def test_unsupported_target_raises(self):
        with pytest.raises(ValueError, match="Unsupported target"):
            get_translator("rust")

    def test_every_translator_is_a_translator(self):
        for target in SUPPORTED_TARGETS:
            translator = get_translator(target)
            assert isinstance(translator, Translator)
            assert translator.TARGET == target

    def test_supported_targets_is_the_constant(self):
        assert SUPPORTED_TARGETS is constants.SUPPORTED_TARGETS
