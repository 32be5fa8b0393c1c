from setuptools import setup, find_packages

setup(
    name="tablewriter",
    version="1.0.0",
    description="Aligned fixed-width text tables with ANSI- and wide-character-aware column widths",
    author="tablewriter contributors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    install_requires=[
        "rich",      # CLI logging
        "tabulate",  # markdown output
        "wcwidth",   # display width of wide characters
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires='>=3.8',
    entry_points={
        "console_scripts": [
            "tablewriter=main:main",
        ]
    },
    include_package_data=True,
)
