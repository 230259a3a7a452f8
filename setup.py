from setuptools import setup, find_packages

install_requires = [
    # --- UI ---
    "flet>=0.70.0",

    # --- MODELS & CONFIG ---
    "pydantic>=2.0.0",
    "pyyaml>=6.0.0",
    "python-dotenv>=1.0.0",
]

extras_require = {
    # --- TESTS ---
    "test": [
        "pytest>=8.0.0",
        "pytest-asyncio>=0.23.0",
    ],
}

setup(
    name="keeplist",
    version="0.1.0",
    description="Keeplist - movie favourites and people lists on an immutable-entity store",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={"keeplist.shared.config": ["settings/*.yaml"]},
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "keeplist=keeplist.main:run",
        ],
    },
    python_requires=">=3.11",
)
