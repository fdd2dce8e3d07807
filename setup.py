from pathlib import Path

from setuptools import find_namespace_packages, setup

# Load README.md as long description
readme_path = Path(__file__).parent / "README.md"
long_description = (
    readme_path.read_text(encoding="utf-8")
    if readme_path.exists()
    else ""
)

setup(
    name="movie-card",
    version="0.1.0",
    description=(
        "Movie search card over the TMDB catalog: paginated search, "
        "guest-session ratings and a Streamlit front end."
    ),
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    # catalog/ y frontend/ son namespace packages (sin __init__.py)
    packages=find_namespace_packages(include=("catalog", "catalog.*", "frontend", "frontend.*")),
    include_package_data=True,
    install_requires=[
        # Core runtime
        "python-dotenv>=1.0",
        "requests>=2.31",
        "typing_extensions>=4.9",

        # Streamlit UI
        "streamlit>=1.32",

        # Recommended (hot reload / warning)
        "watchdog>=3.0",
    ],
    extras_require={
        "dev": [
            # Tooling
            "black>=24.0",
            "ruff>=0.6",
            "pytest>=8.0",

            # Typing / static analysis
            "mypy>=1.8",

            # Stubs
            "types-requests>=2.31",
        ],
    },
    entry_points={
        "console_scripts": [
            "start=catalog.main:start",
        ]
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Web Environment",
        "Framework :: Streamlit",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Topic :: Multimedia :: Video",
    ],
)
