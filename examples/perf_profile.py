"""Simple profiling of tree construction and rendering."""

from __future__ import annotations

import timeit
import tracemalloc

from tracedsl import CodeBlock, StatementFactory, get_dialect

factory = StatementFactory()


def _build_nested(depth: int) -> CodeBlock:
    current: CodeBlock = factory.create_code_block()
    current.statement(factory.create_call("step", "0"))
    for i in range(1, depth):
        outer: CodeBlock = factory.create_code_block()
        handler: CodeBlock = factory.create_code_block()
        handler.statement(factory.create_call("log", "e"))
        outer.try_catch(current, factory.create_variable("Throwable", "e"), handler)
        outer.statement(factory.create_call("step", str(i)))
        current = outer
    return current


def main() -> None:
    duration: float = timeit.timeit(lambda: _build_nested(20), number=1000)
    print(f"Nested construction (20): {duration:.4f}s/1000")

    tree: CodeBlock = _build_nested(50)
    for name in ("java", "kotlin", "python"):
        dialect = get_dialect(name)
        render: float = timeit.timeit(lambda: dialect.render(tree), number=100)
        print(f"{name} render (50): {render:.4f}s/100")

    tracemalloc.start()
    get_dialect().render(_build_nested(200))
    current: int
    peak: int
    current, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    print(f"Deep render memory: current={current} bytes peak={peak} bytes")


if __name__ == "__main__":
    main()
