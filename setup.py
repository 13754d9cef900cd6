"""
Setup.py for my_copy.
"""

import ast
import os

from setuptools import setup

INSTALL_REQUIREMENTS = [
    "six",  # configparser / StringIO compatibility used by core
]
TEST_REQUIREMENTS = [
    "pytest",
    "flake8>=3.7.9",
]

MYCOPY_DIR = os.path.dirname(os.path.abspath(__file__))
CORE_PATH = os.path.join(MYCOPY_DIR, "core.py")


def get_mycopy_version(corepath):
    """
    Find and return the current my_copy version.
    :param corepath: path to the 'core.py' file in the root directory
    :type corepath: str
    :return: the version defined in the corepath
    :rtype: str
    """
    with open(corepath, "r") as fin:
        for line in fin:
            if line.startswith("__version__"):
                version = ast.literal_eval(line.split("=")[1].strip())
                return version
    raise Exception("Could not find my_copy version in file '{f}'".format(f=corepath))


setup(
    name="mycopy",
    version=get_mycopy_version(CORE_PATH),
    description="Copy a file, asking before an existing target is overwritten",
    packages=[
        "mycopy",
        "mycopy.system",
        "mycopy.bin",
        "mycopy.tests",
    ],
    package_dir={
        "mycopy": ".",
    },
    scripts=["bin/my_copy.py", "launch_mycopy.py"],
    zip_safe=False,
    python_requires=">=3.8",
    install_requires=INSTALL_REQUIREMENTS,
    extras_require={
        "testing": TEST_REQUIREMENTS,
    },
)
