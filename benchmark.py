import time
import numpy as np
from chordscope.constants import SHARP_DISPLAY
from chordscope.recognizer import analyze_chord

def run_benchmark():
    # Setup
    np.random.seed(42)
    # 10,000 random note sets of 2-5 distinct pitch classes
    note_sets = []
    for _ in range(10000):
        size = np.random.randint(2, 6)
        pcs = np.random.choice(12, size=size, replace=False)
        note_sets.append([SHARP_DISPLAY[pc] for pc in pcs])

    # Pre-warm
    analyze_chord(note_sets[0])

    # Benchmark
    start_time = time.perf_counter()
    for notes in note_sets:
        analyze_chord(notes)
    end_time = time.perf_counter()

    duration = end_time - start_time
    print(f"Benchmark duration: {duration:.4f} seconds")

if __name__ == '__main__':
    run_benchmark()
