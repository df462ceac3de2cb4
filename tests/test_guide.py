# -*- coding: utf-8 -*-
"""Tests for the R/Python recipe guide."""

import pytest

from geoprimer import Recipe, get_recipe, get_recipes, render_markdown, write_guide


def test_recipes_follow_workflow_order():
    """Recipes go from installing to plotting."""
    keys = [recipe.key for recipe in get_recipes()]
    assert keys == ["setup", "point", "points", "crs", "download", "read", "csv", "filter", "plot"]


def test_every_recipe_has_both_languages():
    """No recipe is missing its R or Python half."""
    for recipe in get_recipes():
        assert recipe.r_code.strip(), recipe.key
        assert recipe.python_code.strip(), recipe.key
        assert not recipe.python_code.startswith("\n")


def test_get_recipe():
    """Recipes are looked up by key."""
    recipe = get_recipe("filter")
    assert "grepl" in recipe.r_code
    assert "str.contains" in recipe.python_code
    assert str(recipe) == "Recipe 'filter': Filtering rows by a substring"

    with pytest.raises(KeyError):
        get_recipe("raster")


def test_get_recipes_returns_copy():
    """Callers cannot reorder the built-in guide."""
    recipes = get_recipes()
    recipes.reverse()
    assert get_recipes()[0].key == "setup"


def test_render_markdown():
    """The document has a contents list and one R and one Python block per recipe."""
    markdown = render_markdown(title="Guide")
    recipes = get_recipes()

    assert markdown.startswith("# Guide\n")
    assert markdown.count("```r\n") == len(recipes)
    assert markdown.count("```python\n") == len(recipes)
    assert "1. [Installing the libraries](#setup)" in markdown
    assert markdown.index("## Creating a single point") < markdown.index("## Plotting")


def test_render_custom_recipes():
    """Custom recipes render with the same layout."""
    recipe = Recipe("buffer", "Buffering", "Grow each feature.", "st_buffer(x, 100)", "x.buffer(100)")
    markdown = render_markdown([recipe])

    assert "## Buffering" in markdown
    assert "st_buffer(x, 100)" in markdown
    assert "Creating a single point" not in markdown


def test_write_guide(tmp_path):
    """The guide is written to a new directory."""
    path = str(tmp_path / "docs" / "guide.md")
    assert write_guide(path) == path

    with open(path, "r", encoding="utf-8") as f:
        assert f.read() == render_markdown()
