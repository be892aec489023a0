from invoke import task

SOURCES = "src tests tasks.py"


@task
def lint(c):
    c.run(f"ruff check {SOURCES}")


@task
def format_check(c):
    c.run(f"ruff format --check {SOURCES}")


@task
def fmt(c):
    c.run(f"ruff format {SOURCES}")
    c.run(f"ruff check --fix {SOURCES}")


@task(help={"k": "Only run tests matching this expression."})
def test(c, k=None):
    selector = f" -k '{k}'" if k else ""
    c.run(f"pytest{selector}")


@task
def ci(c):
    lint(c)
    format_check(c)
    test(c)
