import sys

import pytest


@pytest.fixture
def clean_modules():
    """Drop nicegui and confidencebands from sys.modules; restore them afterwards."""
    saved = dict(sys.modules)
    for mod in [k for k in saved if k.startswith(("nicegui", "confidencebands"))]:
        del sys.modules[mod]
    yield
    sys.modules.clear()
    sys.modules.update(saved)


def test_imports_without_nicegui(clean_modules):
    """Verify the core package does not import nicegui as a side-effect.

    Hosts that only build queries and ECharts options must not pay for the UI
    toolkit. Importing confidencebands (and registering the plugin) should not
    pull nicegui into sys.modules; only confidencebands.widget does.
    """
    import confidencebands
    from confidencebands.plugin import ChartPluginRegistry, register_plugin

    register_plugin(registry=ChartPluginRegistry())
    assert confidencebands.transform_props is not None

    assert not any(k == "nicegui" or k.startswith("nicegui.") for k in sys.modules)
