#!/usr/bin/env python3
"""
run_validator.py

Drives the shell (Repl.py) in script mode and checks expected outputs.
Run from the repository root:

    python run_validator.py

Results go to shell_test_results.txt and are printed to the console.
"""
import os
import shutil
import subprocess
import sys
import tempfile

# Command to run the shell in script mode
SHELL_CMD = [sys.executable, "Repl.py"]

# Output result file
RESULT_FILE = "shell_test_results.txt"

# Generic runner: write a script (list of lines), run the shell, return (rc, stdout+stderr)
def run_script(lines, timeout=20, env=None):
    fd, path = tempfile.mkstemp(prefix="validator_", suffix=".mysh", text=True)
    os.close(fd)
    with open(path, "w", encoding="utf-8") as f:
        for L in lines:
            f.write(L.rstrip() + "\n")
    try:
        proc = subprocess.run(SHELL_CMD + [path], capture_output=True, text=True,
                              timeout=timeout, env=env)
        out = proc.stdout or ""
        err = proc.stderr or ""
        combined = (out + ("\n" + err if err else "")).strip()
        rc = proc.returncode
    except subprocess.TimeoutExpired:
        combined = "<TIMEOUT>"
        rc = None
    finally:
        os.remove(path)
    return rc, combined

# Helper: write result to result file and also print
def write_result(fobj, name, ok, details):
    fobj.write(f"TEST: {name}\n")
    fobj.write(f"RESULT: {'PASS' if ok else 'FAIL'}\n")
    fobj.write("OUTPUT:\n")
    fobj.write(details + "\n")
    fobj.write("-" * 60 + "\n")
    fobj.flush()
    print(f"{name}: {'PASS' if ok else 'FAIL'}")

# Clean previous artifacts used by tests
def cleanup():
    if os.path.isdir("validator_tmp"):
        shutil.rmtree("validator_tmp")

def main():
    cleanup()
    failures = 0
    with open(RESULT_FILE, "w", encoding="utf-8") as f:
        f.write("Shell validator run\n")
        f.write("Command: " + " ".join(SHELL_CMD) + "\n")
        f.write("=" * 60 + "\n\n")

        def check(name, ok, out):
            nonlocal failures
            failures += 0 if ok else 1
            write_result(f, name, ok, out)

        # 1) echo
        rc, out = run_script(["echo hello   world"])
        check("echo", out == "hello world", out)

        # 2) pwd
        rc, out = run_script(["pwd"])
        check("pwd", out == os.getcwd(), out)

        # 3) cd into a directory and back out
        os.mkdir("validator_tmp")
        rc, out = run_script(["cd validator_tmp", "pwd", "cd ..", "pwd"])
        lines = out.splitlines()
        check("cd", lines == [os.path.join(os.getcwd(), "validator_tmp"), os.getcwd()], out)
        cleanup()

        # 4) cd to a missing directory keeps the old one
        rc, out = run_script(["cd /definitely/not/here", "pwd"])
        check("cd missing", "cd: /definitely/not/here: No such file or directory" in out
              and os.getcwd() in out, out)

        # 5) cd ~
        env = dict(os.environ, HOME=tempfile.gettempdir())
        rc, out = run_script(["cd ~", "pwd"], env=env)
        check("cd ~", out.splitlines()[-1] == os.path.normpath(tempfile.gettempdir()), out)

        # 6) type
        rc, out = run_script(["type echo", "type nonexistent_cmd_xyz", "type ls"])
        check("type", "echo is a shell builtin" in out
              and "nonexistent_cmd_xyz: not found" in out
              and "ls is /" in out, out)

        # 7) external command
        rc, out = run_script(["ls Repl.py"])
        check("external command", "Repl.py" in out, out)

        # 8) unknown command error handling
        rc, out = run_script(["unknown_cmd_hopefully_not_present", "echo still here"])
        check("unknown command handling",
              "unknown_cmd_hopefully_not_present: command not found" in out
              and "still here" in out, out)

        # 9) exit codes
        rc, out = run_script(["exit 42", "echo unreachable"])
        check("exit 42", rc == 42 and "unreachable" not in out, out)
        rc, out = run_script(["exit abc"])
        check("exit abc", rc == 0, out)
        rc, out = run_script(["echo no exit"])
        check("end of input", rc == 0, out)

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
