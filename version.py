import os
import re
import subprocess


# Fallback when building outside of a git checkout (source distribution)
version = "0.1.0"

try:
    description = subprocess.check_output(
        ["git", "describe", "--tags"],
        stderr=subprocess.STDOUT,
        cwd=os.path.dirname(os.path.abspath(__file__)),
        universal_newlines=True).rstrip()

except (OSError, subprocess.CalledProcessError):
    pass

else:
    match = re.fullmatch(r"v?(\d+(?:\.\d+)*)(?:-(\d+)-g([0-9a-f]+))?", description)
    if match is None:
        raise RuntimeError("Invalid version format: " + description)

    tag, revision, commit = match.groups()
    if revision is None:  # tagged release
        version = tag
    else:
        version = "{}.dev{}+g{}".format(tag, revision, commit)
