import importlib
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

back = importlib.import_module("eightqueens.backtracking")
print("Module loaded:", back)

for fn_name in ("bt_queens_iterative", "bt_queens_recursive"):
    fn = getattr(back, fn_name)
    print(f"Running {fn_name}()")
    solutions, nodes, elapsed = fn()
    print(f"  -> solutions={len(solutions)}, nodes={nodes}, elapsed={elapsed:.4f}s")
    assert len(solutions) == 92
    print("  -> unique:", len(back.canonicalize(solutions)))

print("Smoke test finished.")
