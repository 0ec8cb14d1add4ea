import shutil
import subprocess
import sys
import threading

from ._common import warn


def launch_paraview(filename):
    """Opens the file in ParaView. Returns without waiting for ParaView to exit; a
    daemon thread reaps the process once it does.
    """
    name = "paraview.exe" if sys.platform == "win32" else "paraview"
    executable = shutil.which(name)
    if executable is None:
        warn(f"Could not find {name} on PATH. Not opening {filename}.")
        return None
    process = subprocess.Popen([executable, f"--data={filename}"])
    threading.Thread(target=process.wait, daemon=True).start()
    return process
