import os
import re
import subprocess


# This line is updated automatically
version = "0.1.0"

# When building from the repository, derive the version from the latest
# tag and store it in this file, source distributions keep the value
# above.
try:
    description = subprocess.check_output(
        "git describe --tags".split(),
        stderr=subprocess.STDOUT,
        cwd=os.path.dirname(os.path.abspath(__file__)),
        universal_newlines=True).rstrip()

except (subprocess.CalledProcessError, OSError):
    pass

else:
    parts = description.lstrip("v").split("-")

    if len(parts) == 1:  # tagged release
        version = parts[0]
    elif len(parts) == 3:  # tag + a few commits
        tag, revision, commit = parts
        version = "{}.post{}+{}".format(tag, revision, commit)
    else:
        raise RuntimeError("Invalid version format: " + description)

    with open(__file__) as f:
        thisfile = f.read()

    with open(__file__, "w") as f:
        f.write(re.sub(r"version = \".*\"\n",
                       "version = \"{}\"\n".format(version),
                       thisfile, count=1))
