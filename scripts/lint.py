"""
Lint script runner.
"""
import subprocess


def main():
    """
    Lint the Indy-lang project using flake8 and pylint.
    """
    print("Running flake8...")
    subprocess.run([
        "flake8",
        "./indylang",
        "./indy.py",
        "./vscode/server",
        "--exclude=indylang/tests",
        "--max-line-length=120",
    ], check=True)

    print("Running pylint...")
    subprocess.run([
        "pylint",
        "./indylang",
        "./indy.py",
        "--ignore=tests",
    ], check=True)


if __name__ == "__main__":
    main()
