"""Unit tests for RequireJS calls and the trailer script."""

from __future__ import annotations

import json
import typing as typ

import pytest

from web_assets import AssetNotFoundError, AssetUrlError, WebAssets, WebAssetsConfig

if typ.TYPE_CHECKING:
    from pathlib import Path

INLINE = (
    '<script type="text/javascript">/*<![CDATA[*/web_assets_inline_js='
    "{payload}/*]]>*/</script>"
)


def _inline(calls: str) -> str:
    return INLINE.format(payload=json.dumps(f"require([],function(){{{calls}}});"))


def test_add_js_call_without_args(assets: WebAssets) -> None:
    assets.add_js_call("Acme/Shop", "main")
    expected = (
        r'<script type="text/javascript">/*<![CDATA[*/web_assets_inline_js='
        r'"require([],function(){require([\"Acme/Shop\"],function(page)'
        r"{'use strict';page.main();});});"
        '"/*]]>*/</script>'
    )
    assert assets.render_js() == expected


def test_add_js_call_json_encodes_args(assets: WebAssets) -> None:
    assets.add_js_call("Acme/Shop", "main", ["foo", 1, False, None])
    call = (
        'require(["Acme/Shop"],function(page){\'use strict\';'
        'page.main("foo",1,false,null);});'
    )
    assert assets.render_js() == _inline(call)


def test_add_js_call_from_identifier(assets: WebAssets) -> None:
    """A namespaced identifier maps onto the RequireJS namespace."""
    assets.add_js_call("Acme.Shop.Cart", "init", [42])
    call = (
        'require(["Acme/Shop/Cart"],function(page){\'use strict\';page.init(42);});'
    )
    assert assets.render_js() == _inline(call)


def test_js_calls_accumulate_in_order(assets: WebAssets) -> None:
    assets.add_js_call("Acme/Shop", "first")
    assets.add_js_call("Acme/Shop/Cart", "second")
    rendered = str(assets.render_js())
    assert rendered.index("page.first") < rendered.index("page.second")
    assert rendered.count("<script") == 1, "calls should share one script element"


def test_missing_js_module_raises(assets: WebAssets, asset_dir: Path) -> None:
    with pytest.raises(AssetNotFoundError) as excinfo:
        assets.add_js_call("Acme/Shop/Bax", "main", ["foo", False])
    expected_path = asset_dir.resolve() / "js" / "Acme" / "Shop" / "Bax.js"
    assert excinfo.value.path == expected_path
    assert "JavaScript" in str(excinfo.value)
    assert assets.render_js() == ""


def test_inline_script_cannot_close_script_element(assets: WebAssets) -> None:
    """Arguments containing '</script>' must not end the element early."""
    assets.add_js_call("Acme/Shop", "main", ["</script><b>"])
    rendered = str(assets.render_js())
    assert rendered.count("</script>") == 1
    assert rendered.endswith("/*]]>*/</script>")


def test_set_js_main(assets: WebAssets) -> None:
    assets.set_js_main("Acme.Shop.Cart")
    expected = (
        '<script src="/js/require.js" data-main="/js/Acme/Shop/Cart.main.js"></script>'
    )
    assert assets.render_js() == expected


def test_set_js_main_accepts_require_namespace(assets: WebAssets) -> None:
    assets.set_js_main("Acme/Shop/Cart")
    element = assets.js_elements()[0]
    assert element.attributes == {
        "src": "/js/require.js",
        "data-main": "/js/Acme/Shop/Cart.main.js",
    }


def test_set_js_main_missing_raises(assets: WebAssets) -> None:
    with pytest.raises(AssetNotFoundError):
        assets.set_js_main("Acme.Shop.Bax")
    assert assets.js_elements() == []


def test_set_js_trailer_skips_existence_check(assets: WebAssets) -> None:
    assets.set_js_trailer("/js/Acme/Shop/Cart.bundle.js")
    assert assets.render_js() == '<script src="/js/Acme/Shop/Cart.bundle.js"></script>'


def test_trailer_is_replaced_not_accumulated(assets: WebAssets) -> None:
    assets.set_js_trailer("/js/one.js")
    assets.set_js_main("Acme.Shop.Cart")
    assert len(assets.js_elements()) == 1


def test_inline_script_renders_before_trailer(assets: WebAssets) -> None:
    assets.set_js_main("Acme.Shop.Cart")
    assets.add_js_call("Acme/Shop", "main")
    elements = assets.js_elements()
    assert [element.attributes.get("src") for element in elements] == [
        None,
        "/js/require.js",
    ]


def test_custom_roots_and_variable(asset_dir: Path) -> None:
    (asset_dir / "static" / "scripts").mkdir(parents=True)
    (asset_dir / "static" / "scripts" / "app.js").write_text("", encoding="utf-8")
    (asset_dir / "static" / "scripts" / "loader.js").write_text("", encoding="utf-8")
    (asset_dir / "static" / "scripts" / "app.main.js").write_text(
        "", encoding="utf-8"
    )
    config = WebAssetsConfig(
        asset_dir=asset_dir,
        js_root_url="/static/scripts/",
        inline_js_variable="page_js",
        require_namespace="loader",
    )
    assets = WebAssets(config)
    assets.add_js_call("app", "boot")
    assets.set_js_main("app")
    rendered = str(assets.render_js())
    assert "/*<![CDATA[*/page_js=" in rendered
    assert 'src="/static/scripts/loader.js"' in rendered
    assert 'data-main="/static/scripts/app.main.js"' in rendered


def test_js_root_is_normalized_when_built_in_code(asset_dir: Path) -> None:
    assets = WebAssets(WebAssetsConfig(asset_dir=asset_dir, js_root_url="js"))
    assets.set_js_main("Acme.Shop.Cart")
    assert assets.js_elements()[0].attributes == {
        "src": "/js/require.js",
        "data-main": "/js/Acme/Shop/Cart.main.js",
    }


@pytest.mark.parametrize("namespace", ["../../outside", "Acme/../../../outside"])
def test_namespace_cannot_leave_js_root(
    assets: WebAssets, tmp_path: Path, namespace: str
) -> None:
    (tmp_path / "outside.js").write_text("", encoding="utf-8")
    (tmp_path / "outside.main.js").write_text("", encoding="utf-8")
    with pytest.raises(AssetUrlError):
        assets.add_js_call(namespace, "main")
    with pytest.raises(AssetUrlError):
        assets.set_js_main(namespace)
    assert assets.js_elements() == []
