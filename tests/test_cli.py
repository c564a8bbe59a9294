"""CLI tests."""
import pytest

from bookstore import cli


@pytest.fixture
def run(session_factory, monkeypatch):
    """Run CLI commands against the test database."""
    monkeypatch.setattr(cli, "AsyncSessionLocal", session_factory)

    async def _run(*argv: str) -> int:
        return await cli.run_command(cli.build_parser().parse_args(argv))

    return _run


ADD_ARGS = ("add", "-t", "Clean Code", "-a", "Robert C. Martin", "-i", "0132350884", "-y", "2008")


@pytest.mark.asyncio
async def test_add_and_list(run, capsys):
    """Test adding a book and listing it."""
    assert await run(*ADD_ARGS) == 0
    assert "Created book 1" in capsys.readouterr().out

    assert await run("list") == 0
    out = capsys.readouterr().out
    assert "BOOKS (1)" in out
    assert "Clean Code" in out


@pytest.mark.asyncio
async def test_get_and_find(run, capsys):
    """Test showing a book by id and by ISBN."""
    await run(*ADD_ARGS)
    capsys.readouterr()

    assert await run("get", "1") == 0
    assert "0132350884" in capsys.readouterr().out

    assert await run("find", "0132350884") == 0
    assert "Robert C. Martin" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_duplicate_add_fails(run, capsys):
    """Test a duplicate ISBN exits non-zero with the conflict category."""
    await run(*ADD_ARGS)

    assert await run(*ADD_ARGS) == 1
    assert "CONFLICT" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_add_missing_fields_lists_violations(run, capsys):
    """Test validation failures print each field."""
    assert await run("add", "-t", "Only a title") == 1
    err = capsys.readouterr().err
    assert "VALIDATION_ERROR" in err
    assert "author" in err
    assert "publication_year" in err


@pytest.mark.asyncio
async def test_update_and_delete(run, capsys):
    """Test updating then deleting a book."""
    await run(*ADD_ARGS)

    assert await run(
        "update", "1", "-t", "Clean Code 2", "-a", "Robert C. Martin", "-i", "0132350884", "-y", "2009"
    ) == 0
    assert "Updated book 1" in capsys.readouterr().out

    assert await run("delete", "1") == 0
    assert await run("get", "1") == 1
    assert "NOT_FOUND" in capsys.readouterr().err


def test_parser_requires_command():
    """Test running without a command is a usage error."""
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args([])
