"""Tests for css_audit.specificity."""
from __future__ import annotations

import pytest

from css_audit.specificity import specificity_of


class TestSpecificityOf:
    @pytest.mark.parametrize(
        "selector, expected",
        [
            ("#a#b.c", (2, 1, 0)),
            ("div.class", (0, 1, 1)),
            ("*", (0, 0, 0)),
            ("a:hover", (0, 1, 1)),
            ("p::before", (0, 0, 2)),
            ('input[type="text"]', (0, 1, 1)),
            ("#nav .item:hover", (1, 2, 0)),
            ("ul > li + li ~ span", (0, 0, 4)),
        ],
    )
    def test_known_weights(self, selector, expected):
        assert specificity_of(selector) == expected

    def test_class_attribute_and_pseudo_counted_on_same_text(self):
        # A dot inside an attribute value also counts as a class
        assert specificity_of('a[href$=".pdf"]') == (0, 2, 1)
        assert specificity_of('a[data-x=":y"]:hover') == (0, 3, 1)

    def test_pseudo_element_is_not_a_pseudo_class(self):
        _, classes, elements = specificity_of(".tip::after")
        assert classes == 1
        assert elements == 1

    def test_combinators_and_universal_count_nothing(self):
        assert specificity_of("* > * + * ~ *") == (0, 0, 0)

    @pytest.mark.parametrize("selector", ["", "   ", "{{", "#", ".", "[unclosed", "::"])
    def test_malformed_input_degrades(self, selector):
        weight = specificity_of(selector)
        assert all(n >= 0 for n in weight)

    def test_deterministic(self):
        sel = "body #main .card > a.link:focus-visible::after"
        assert specificity_of(sel) == specificity_of(sel)
