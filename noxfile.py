from __future__ import annotations

import nox


@nox.session(python="3.12")
def tests(session: nox.Session) -> None:
    session.install("-e", ".[test]")
    session.run("pytest", "-q", *session.posargs)


@nox.session(python="3.12")
def error_codes(session: nox.Session) -> None:
    session.install("-e", ".")
    session.run("python", "scripts/check_error_codes.py")


@nox.session(python=False)
def mypy(session: nox.Session) -> None:
    session.run("mypy", "src/codereg", *session.posargs)


@nox.session(python=False)
def pyright(session: nox.Session) -> None:
    session.run("pyright", "src/codereg", *session.posargs)


# Alias with version suffix for CI convenience
@nox.session(name="tests-3.10", python="3.10")
def tests_310(session: nox.Session) -> None:
    tests(session)
