import contextlib

import pytest

from gitstore.main import main

HELLO_SHA = "ce013625030ba8dba906f756967f9e9ca394464a"


@pytest.fixture
def change_to_tmp_dir(tmp_path, monkeypatch, capsys):
    monkeypatch.delenv("GIT_DIR", raising=False)
    with contextlib.chdir(tmp_path):
        assert main(["init"]) == 0
        yield tmp_path


class TestMain:
    def test_init(self, change_to_tmp_dir, capsys):
        assert (change_to_tmp_dir / ".git" / "objects").is_dir()
        assert "Initialized empty repository" in capsys.readouterr().out

    def test_hash_object_and_cat_file(self, change_to_tmp_dir, capsys):
        (change_to_tmp_dir / "hello.txt").write_text("hello\n")
        capsys.readouterr()

        assert main(["hash-object", "-w", "hello.txt"]) == 0
        assert capsys.readouterr().out == f"{HELLO_SHA}\n"

        assert main(["cat-file", "-p", HELLO_SHA]) == 0
        assert capsys.readouterr().out == "hello\n"

    def test_hash_object_without_write(self, change_to_tmp_dir, capsys):
        (change_to_tmp_dir / "hello.txt").write_text("hello\n")
        assert main(["hash-object", "hello.txt"]) == 0
        assert not (change_to_tmp_dir / ".git/objects" / HELLO_SHA[:2]).exists()

    @pytest.mark.parametrize(
        "args, message",
        [
            (["cat-file", "-p", "nope"], "Not a valid object name"),
            (["cat-file", "-p", "0" * 40], "Not found"),
            (["ls-tree", "0" * 40], "Not found"),
            (["hash-object", "missing.txt"], "Not found"),
        ],
    )
    def test_failures(self, change_to_tmp_dir, capsys, args, message):
        assert main(args) == 1
        err = capsys.readouterr().err
        assert err.startswith("fatal: ")
        assert message in err

    def test_write_tree_and_ls_tree(self, change_to_tmp_dir, capsys):
        (change_to_tmp_dir / "hello.txt").write_text("hello\n")
        (change_to_tmp_dir / "docs").mkdir()
        (change_to_tmp_dir / "docs" / "index.md").write_text("# docs\n")
        capsys.readouterr()

        assert main(["write-tree"]) == 0
        tree_sha = capsys.readouterr().out.strip()
        assert len(tree_sha) == 40

        assert main(["ls-tree", "--name-only", tree_sha]) == 0
        assert capsys.readouterr().out == "docs\nhello.txt\n"

        assert main(["ls-tree", tree_sha]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[1] == f"100644 blob {HELLO_SHA}\thello.txt"
        assert lines[0].startswith("040000 tree ")
        assert lines[0].endswith("\tdocs")

    def test_custom_git_dir(self, tmp_path, capsys):
        repo = tmp_path / "store"
        assert main(["--git-dir", str(repo), "init"]) == 0
        (tmp_path / "hello.txt").write_text("hello\n")
        assert main(["--git-dir", str(repo), "hash-object", "-w", str(tmp_path / "hello.txt")]) == 0
        assert (repo / "objects" / HELLO_SHA[:2] / HELLO_SHA[2:]).is_file()
