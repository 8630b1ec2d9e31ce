import os

from setuptools import setup, find_packages


# allow setup.py to be run from any path
os.chdir(os.path.normpath(os.path.join(os.path.abspath(__file__), os.pardir)))

version = open(os.path.join(os.path.abspath(os.path.dirname(__file__)), 'txdb_build', 'VERSION')).read().strip()


def get_requires():
    requires = []
    with open("requirements.txt", "rt") as req_file:
        for line in req_file:
            requires.append(line.rstrip())
    return requires


classifiers = [
    "Natural Language :: English",
    "License :: OSI Approved :: Apache Software License",
    "Programming Language :: Python :: 3"
]

# Extract the markdown description. Supported by PyPi in its native format
with open("README.md", "r") as fh:
    long_description = fh.read()

setup(name='txdb-build',
      version=version,
      packages=find_packages(exclude=['tests', 'tests.*']),
      install_requires=get_requires(),
      extras_require={
          'test': ['pytest']
      },
      package_data={
          'txdb_build': ['VERSION', 'resources/*']
      },
      scripts=['bin/txdb_build/build_tx_db_pass2.py'],
      description='Builds and checksums the pass-2 mehari transcript database',
      long_description=long_description,
      long_description_content_type="text/markdown",
      tests_require=get_requires() + ['pytest'],
      python_requires='>=3.8',
      classifiers=classifiers
      )
