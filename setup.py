from setuptools import setup, find_packages
from version import version


with open("README.rst") as f:
    long_description = f.read()

setup(
    name="SeqManip",
    version=version,
    description="Eager and lazy map/filter/reduce/chunk operations over sequences and item producers",
    long_description=long_description,
    keywords=['map', 'filter', 'reduce', 'lazy', 'producer', 'pipeline'],
    license="Mozilla Public License 2.0 (MPL 2.0)",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Development Status :: 3 - Alpha",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Intended Audience :: Developers"],
    packages=find_packages(exclude=['tests']),
    python_requires='>=3.6',
    install_requires=[
        'tblib'],
    extras_require={
        'tests': [
            'pytest', 'pytest-timeout']
    }
)
