from setuptools import setup
import os

base_dir = os.path.abspath(os.path.dirname(__file__))
readme_path = os.path.join(base_dir, "README.md")

long_description = ""
if os.path.exists(readme_path):
    with open(readme_path, encoding="utf-8") as f:
        long_description = f.read()

setup(
    name="exprparse",
    version="1.0.0",
    description="Recursive-descent parser for integer arithmetic with a symbol table and parse-tree view",
    long_description=long_description,
    long_description_content_type="text/markdown",
    py_modules=[
        "expr_main",
        "expr_config",
        "expr_errors",
        "expr_lexer",
        "expr_parser",
        "expr_tree",
    ],
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    entry_points={
        "console_scripts": [
            "exprparse=expr_main:main",
        ],
    },
    include_package_data=True,
)
