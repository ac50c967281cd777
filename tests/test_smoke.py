from tracedsl import StatementFactory, get_dialect, validate_rendered


def _trace_program():
    f = StatementFactory()
    root = f.create_code_block()
    result = root.declare(f.create_variable("Object", "result"), "null")
    body = f.create_code_block()
    body.assign(result, f.create_call("evaluate"))
    handler = f.create_code_block()
    err = f.create_variable("Throwable", "t")
    handler.statement(f.create_call("report", err))
    root.try_catch(body, err, handler)
    root.statement(f.create_call("emit", result))
    return root


def test_build_and_render_java():
    code = _trace_program().to_code()
    assert code == (
        "Object result = null;\n"
        "try {\n"
        "  result = evaluate();\n"
        "} catch(final Throwable t) {\n"
        "  report(t);\n"
        "}\n"
        "emit(result);\n"
    )


def test_python_output_passes_self_check():
    block = _trace_program()
    res = validate_rendered(block)
    assert res.ok, res.errors
    assert "except Throwable as t:" in block.to_code(dialect=get_dialect("python"))
