# setup.py
from setuptools import setup, find_packages

setup(
    name="flispy",
    version="0.0.0.1",
    description="A small Lisp-like expression evaluator with q-expressions",
    packages=find_packages(include=["flispy", "flispy.*"]),
    python_requires=">=3.10",
    install_requires=[
        "lark>=1.1",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["flispy = flispy.repl:main"],
    },
    zip_safe=False,
)
