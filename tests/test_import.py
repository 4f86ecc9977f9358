"""Basic import tests to verify package structure."""


def test_import_forcegraph():
    """Verify main package imports."""
    import forcegraph
    assert forcegraph.__version__ == "0.1.0"


def test_import_core():
    """Verify core module structure exists."""
    from forcegraph import core
    assert hasattr(core, "ForceGraph")
    assert hasattr(core, "SimulationParameters")


def test_import_analysis():
    """Verify analysis module structure exists."""
    from forcegraph import analysis
    assert hasattr(analysis, "settle")


def test_import_viz():
    """Verify viz module structure exists."""
    from forcegraph import viz
    assert hasattr(viz, "plot_graph")
