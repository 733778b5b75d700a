import os

from setuptools import find_packages, setup

README = os.path.join(os.path.dirname(__file__), "README.md")


def readme() -> str:
    with open(README, encoding="utf-8") as f:
        return f.read()


setup(
    name="graphql_to_json_schema",
    version="1.0.0",
    description="Generate a JSON Schema configuration document and Markdown docs from GraphQL type definitions",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Code Generators",
        "Topic :: Text Processing",
        "Intended Audience :: Developers",
    ],
    keywords="graphql json schema code generation markdown documentation",
    license="MIT",
    packages=find_packages(),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.0.0",
        "jinja2>=3.0.0",
        "graphql-core>=3.2.0",
        "httpx>=0.24.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
        ],
        "typings": [
            "datamodel-code-generator>=0.25.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "graphql_to_json_schema=graphql_to_json_schema.graphql_to_json_schema:graphql_to_json_schema",
        ],
    },
    include_package_data=True,
    package_data={
        "graphql_to_json_schema": ["templates/**/*.jinja2"],
    },
    zip_safe=False,
)
