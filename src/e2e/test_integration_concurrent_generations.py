import threading
import pytest
from swipe_engine.engine import Engine

GEN_A = "cat\t100\ncar\t90\ncab\t80\ncan\t70\n"
GEN_B = "cot\t100\ncut\t90\ncog\t80\ncup\t70\n"
WORDS_A = {"cat", "car", "cab", "can"}
WORDS_B = {"cot", "cut", "cog", "cup"}

@pytest.mark.e2e
def test_predictions_never_mix_generations():
    eng = Engine()
    eng.load_text(GEN_A)
    stop = threading.Event()
    failures: list[str] = []
    seen_generations: set[int] = set()
    lock = threading.Lock()

    def reader():
        while not stop.is_set():
            rows = eng.predict("cat", limit=10)
            words = {r.word for r in rows}
            gens = {r.generation for r in rows}
            if len(gens) != 1 or not (words <= WORDS_A or words <= WORDS_B):
                with lock:
                    failures.append(f"{sorted(words)} gens={sorted(gens)}")
            with lock:
                seen_generations.update(gens)

    def writer():
        for i in range(200):
            eng.load_text(GEN_B if i % 2 == 0 else GEN_A)
        stop.set()

    readers = [threading.Thread(target=reader) for _ in range(8)]
    for t in readers:
        t.start()
    w = threading.Thread(target=writer)
    w.start()
    w.join(timeout=60)
    stop.set()
    for t in readers:
        t.join(timeout=60)

    assert not failures, failures[:5]
    assert len(seen_generations) >= 1
    assert eng.generation == 201
