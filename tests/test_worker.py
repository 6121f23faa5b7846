import json
import threading
import time

from src.frames import FrameQueue
from src.pipeline import OpticsPipeline
from src.worker import Worker


def _payload(fx=1400.0, width=1920):
    return {
        "image_width": width,
        "image_height": 1080,
        "matrix": [[fx, 0.0, 0.0], [0.0, fx, 0.0], [960.0, 540.0, 1.0]],
        "lens_position": 0.4,
    }


def _worker(calibration, sink, maxsize=8):
    queue = FrameQueue(maxsize=maxsize)
    pipeline = OpticsPipeline(calibration=calibration, sink=lambda label, distance: sink.append(distance))
    return queue, Worker(frame_queue=queue, pipeline=pipeline, max_wait_time=0.05)


def test_process_frame_accepts_samples_and_payloads(calibration, make_sample):
    distances = []
    _, worker = _worker(calibration, distances)

    assert worker.process_frame(make_sample(fx=1400.0)) is not None
    assert worker.process_frame(_payload(fx=1383.95)) is not None

    assert distances == ["0.41m", "-"]
    assert worker.processed == 2


def test_invalid_frames_are_rejected_without_raising(calibration):
    distances = []
    _, worker = _worker(calibration, distances)

    assert worker.process_frame(_payload(width=0)) is None
    assert worker.process_frame({"image_width": 10}) is None
    assert worker.process_frame("not a frame") is None

    assert worker.rejected == 3
    assert worker.processed == 0
    assert distances == []


def test_pipeline_failures_are_contained(calibration, make_sample):
    def broken_sink(label, distance):
        raise RuntimeError("vista no disponible")

    worker = Worker(
        frame_queue=FrameQueue(),
        pipeline=OpticsPipeline(calibration=calibration, sink=broken_sink),
    )

    assert worker.process_frame(make_sample()) is None
    assert worker.failed == 1


def test_start_consumes_until_queue_is_drained(calibration):
    distances = []
    queue, worker = _worker(calibration, distances)
    for fx in (1400.0, 1383.95, 1500.0):
        queue.put(_payload(fx=fx))
    queue.close()

    worker.start()

    assert len(distances) == 3
    assert distances[1] == "-"
    assert worker.processed == 3
    assert not worker.is_running


def test_stop_ends_the_loop(calibration):
    distances = []
    _, worker = _worker(calibration, distances)

    thread = threading.Thread(target=worker.start)
    thread.start()
    deadline = time.monotonic() + 5
    while not worker.is_running and time.monotonic() < deadline:
        time.sleep(0.01)
    worker.stop()
    thread.join(timeout=5)

    assert not thread.is_alive()


def test_non_finite_dimension_does_not_stop_the_loop(calibration):
    distances = []
    queue, worker = _worker(calibration, distances)
    queue.put(json.loads('{"image_width": Infinity, "image_height": 1080, '
                         '"matrix": [[1400, 0, 0], [0, 1400, 0], [960, 540, 1]]}'))
    queue.put(_payload(fx=1400.0))
    queue.close()

    worker.start()

    assert worker.rejected == 1
    assert worker.processed == 1
    assert distances == ["0.41m"]


def test_non_numeric_dimension_in_sample_is_rejected(calibration, make_sample):
    distances = []
    _, worker = _worker(calibration, distances)

    assert worker.process_frame(make_sample(width=None)) is None
    assert worker.process_frame(make_sample(height="1080")) is None

    assert worker.rejected == 2
    assert distances == []


def test_stop_before_start_is_honoured(calibration):
    distances = []
    queue, worker = _worker(calibration, distances)
    queue.put(_payload())

    worker.stop()
    thread = threading.Thread(target=worker.start)
    thread.start()
    thread.join(timeout=5)

    assert not thread.is_alive()
    assert worker.processed == 0
    assert len(queue) == 1
