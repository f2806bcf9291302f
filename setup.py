import re
import ast
import os
from setuptools import setup


_version_re = re.compile(r"__version__\s+=\s+(.*)")


with open("redis_commands/__init__.py", "rb") as f:
    version = str(
        ast.literal_eval(_version_re.search(f.read().decode("utf-8")).group(1))
    )

install_requires = ["redis>=4.1"]

# override the redis version in the requirements if REDIS_VERSION is set
REDIS_VERSION = os.environ.get('REDIS_VERSION')
if REDIS_VERSION:
    install_requires = [
        'redis{}'.format(REDIS_VERSION)
        if r.startswith('redis>=') else r
        for r in install_requires
    ]


setup(
    name="redis-commands",
    author="Functional Software Inc.",
    author_email="hello@getsentry.com",
    version=version,
    url="http://github.com/getsentry/rb",
    packages=["redis_commands"],
    description="Redis command metadata and key position lookups",
    install_requires=install_requires,
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.7",
    classifiers=[
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
    ],
)
