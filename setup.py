from setuptools import setup, find_packages

setup(
    name="contextor",
    version="0.1.0",
    description="Watch the clipboard for GitHub links and fetch repository context for LLMs",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "aiohttp",
        "orjson",
        "pyperclip",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    entry_points={
        "console_scripts": [
            "contextor=contextor.cli:main",
        ],
    },
    python_requires=">=3.10",
)
