import sys

from gitstore.models import Git, GitError
from gitstore.utils import configure_logging, get_parser


def report(error: GitError) -> int:
    sys.stderr.write(f"fatal: {error}\n")
    return 1


def main(argv=None) -> int:
    parser = get_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    git = Git(args.git_dir)
    match args.command:
        case "init":
            git.init_repo()
            sys.stdout.write(f"Initialized empty repository in {git.git_folder}\n")
            return 0
        case "cat-file":
            result = git.get_blob(args.hash)
            if not result.is_success:
                return report(result.error)
            if args.pretty_print:
                sys.stdout.buffer.write(result.value.content)
                sys.stdout.flush()
            return 0
        case "hash-object":
            result = git.hash_object(args.path, write=args.write)
        case "ls-tree":
            result = git.get_tree(args.hash_value)
            if not result.is_success:
                return report(result.error)
            for entry in result.value.entries:
                if args.name_only:
                    sys.stdout.write(f"{entry.path}\n")
                else:
                    sys.stdout.write(f"{entry.mode} {entry.type} {entry.sha}\t{entry.path}\n")
            return 0
        case "write-tree":
            result = git.write_tree()
        case _:
            raise RuntimeError(f"Unknown command #{args.command}")

    if not result.is_success:
        return report(result.error)
    sys.stdout.write(f"{result.value}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
