import pytest

from src.domain import OpticsMetrics
from src.nodes.optics import IntrinsicsAnalyzerNode, MetricsFormatterNode
from src.nodes.presentation import PresentationSinkNode
from src.pipeline import OpticsPipeline


class RecordingSink:
    def __init__(self):
        self.calls = []

    def __call__(self, metrics_label, distance_label):
        self.calls.append((metrics_label, distance_label))


def test_analyzer_node_writes_metrics(make_sample, calibration):
    node = IntrinsicsAnalyzerNode(calibration=calibration, name="Intrinsics")
    context = node.run({"intrinsic_sample": make_sample(fx=1400.0)})

    metrics = context["optics_metrics"]
    assert isinstance(metrics, OpticsMetrics)
    assert metrics.h_focal_length == 1400.0
    assert metrics.subject_distance is not None


def test_analyzer_node_requires_sample(calibration):
    node = IntrinsicsAnalyzerNode(calibration=calibration)

    with pytest.raises(ValueError, match="intrinsic_sample"):
        node.run({})


def test_formatter_node_requires_metrics():
    with pytest.raises(ValueError, match="optics_metrics"):
        MetricsFormatterNode().run({})


def test_sink_node_skips_without_labels():
    sink = RecordingSink()
    context = PresentationSinkNode(sink=sink).run({"metrics_label": "x"})

    assert sink.calls == []
    assert context == {"metrics_label": "x"}


def test_sink_node_propagates_sink_errors():
    def broken_sink(metrics_label, distance_label):
        raise RuntimeError("vista no disponible")

    node = PresentationSinkNode(sink=broken_sink)
    with pytest.raises(RuntimeError):
        node.run({"metrics_label": "x", "distance_label": "-"})


def test_pipeline_runs_nodes_in_order(make_sample, calibration):
    sink = RecordingSink()
    pipeline = OpticsPipeline(calibration=calibration, sink=sink)

    assert [node.name for node in pipeline.nodes] == ["Intrinsics", "Formatter", "Presentation"]

    initial = {"frame_id": 7, "intrinsic_sample": make_sample(fx=1400.0)}
    result = pipeline.run(initial)

    assert sink.calls == [(result["metrics_label"], result["distance_label"])]
    assert result["distance_label"] == "0.41m"
    assert set(result["execution_times"]) == {"Intrinsics", "Formatter", "Presentation", "total_pipeline"}
    # the caller's context is not modified
    assert "optics_metrics" not in initial


def test_pipeline_reports_unknown_distance(make_sample, calibration):
    sink = RecordingSink()
    pipeline = OpticsPipeline(calibration=calibration, sink=sink)

    result = pipeline.run({"intrinsic_sample": make_sample(fx=1383.95)})

    assert result["optics_metrics"].subject_distance is None
    assert sink.calls[0][1] == "-"


def test_pipeline_reraises_node_errors(calibration):
    pipeline = OpticsPipeline(calibration=calibration, sink=RecordingSink())

    with pytest.raises(ValueError):
        pipeline.run({})


def test_node_require_and_repr(calibration):
    node = IntrinsicsAnalyzerNode(calibration=calibration, name="Intrinsics")

    assert repr(node) == "IntrinsicsAnalyzerNode(name='Intrinsics')"
    assert node.require({"a": 1}, "a") == 1
    with pytest.raises(ValueError, match=r"\[Intrinsics\] 'a'"):
        node.require({"a": None}, "a")
