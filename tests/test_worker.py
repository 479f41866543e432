import threading

import pytest

from cluedo.worker import ThreadSafeQueue, Worker


class Blocking(Worker):
    def __init__(self):
        super().__init__("blocking")
        self.release = threading.Event()
        self.ran = 0
        self.thread_name = None

    def run(self):
        self.thread_name = threading.current_thread().name
        self.release.wait(5)
        self.ran += 1


def test_worker_is_abstract():
    with pytest.raises(TypeError):
        Worker()


def test_split_and_join_cycle():
    worker = Blocking()
    assert Worker.split(worker)
    assert Worker.is_running(worker)
    assert not Worker.split(worker)
    worker.release.set()
    assert Worker.join(worker)
    assert worker.ran == 1
    assert not Worker.is_running(worker)
    assert not Worker.join(worker)


def test_join_without_split():
    assert Worker.join(Blocking()) is False


def test_thread_carries_name():
    worker = Blocking()
    worker.release.set()
    Worker.split(worker)
    Worker.join(worker)
    assert worker.thread_name == "blocking"


def test_can_split_again_after_join():
    worker = Blocking()
    worker.release.set()
    Worker.split(worker)
    Worker.join(worker)
    assert Worker.split(worker)
    Worker.join(worker)
    assert worker.ran == 2


def test_queue_is_fifo():
    queue = ThreadSafeQueue()
    for value in ("a", "b", "c"):
        queue.add(value)
    assert [queue.remove(), queue.remove(), queue.remove()] == ["a", "b", "c"]


def test_remove_from_empty_queue_raises():
    with pytest.raises(IndexError):
        ThreadSafeQueue().remove()


def test_clear_empties_queue():
    queue = ThreadSafeQueue()
    queue.add(1)
    queue.add(2)
    queue.clear()
    assert len(queue) == 0
    with pytest.raises(IndexError):
        queue.remove()


def test_concurrent_adds_are_all_kept():
    queue = ThreadSafeQueue()

    def fill(offset):
        for n in range(100):
            queue.add(offset + n)

    threads = [threading.Thread(target=fill, args=(k * 100,)) for k in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(queue) == 400
    assert sorted(queue.remove() for _ in range(400)) == list(range(400))