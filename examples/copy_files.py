from rich.console import Console

from argscan import ONE_OR_MORE, ArgumentParser

console = Console()

parser = ArgumentParser(
    app_name="copy files",
    error_mode="raise",
    description="Copy one or more sources into a destination directory.",
)
parser.add_argument("-d", "--dest", required=True, help="Destination directory.")
parser.add_argument("-m", "--mode", default="0644", help="Permission bits.")
parser.add_argument("--exclude", nargs="*", help="Glob patterns to skip.")
parser.add_argument("-f", "--force", nargs=0, help="Overwrite existing files.")
parser.add_final_argument("sources", nargs=ONE_OR_MORE, help="Files to copy.")

console.print(parser.format_help(), markup=False)

parser.parse(
    [
        "copy",
        "--dest",
        "/tmp/out",
        "--exclude",
        "*.pyc",
        "-f",
        "setup.py",
        "README.md",
    ]
)

console.print(f"dest:    {parser.retrieve('dest')}", markup=False)
console.print(f"mode:    {parser.retrieve('mode', int)}", markup=False)
console.print(f"exclude: {parser.retrieve('exclude')}", markup=False)
console.print(f"force:   {parser.supplied('force')}", markup=False)
console.print(f"sources: {parser.retrieve('sources', tuple)}", markup=False)
