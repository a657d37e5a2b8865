"""
SumPyramid: Entry point.

Print a freshly generated puzzle and the step-by-step trail that solves it.
"""

import sys

from sumpyramid import generate_puzzle, solve_step_by_step


def main(argv=None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    mode = argv[0] if argv else "real"

    puzzle = generate_puzzle({"mode": mode})
    result = solve_step_by_step(puzzle)

    print(f"Pyramid of height {puzzle.height} ({puzzle.mode})")
    for step in result["steps"]:
        print(f"\n  {step['description']}")
        for line in step["expression"].split('\n'):
            print(f"    {line}")
    print(f"\n  => {result['summary']['validation_status']} "
          f"in {result['summary']['total_steps']} steps")


if __name__ == "__main__":
    main()
