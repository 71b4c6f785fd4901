"""Setup script for Coding Analytics."""

from setuptools import setup, find_packages
import os

# Read README file
def read_readme():
    readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
    if os.path.exists(readme_path):
        with open(readme_path, 'r', encoding='utf-8') as f:
            return f.read()
    return "Analytical views over qualitative-research coding data"

# Read requirements
def read_requirements():
    requirements_path = os.path.join(os.path.dirname(__file__), 'requirements.txt')
    if os.path.exists(requirements_path):
        with open(requirements_path, 'r') as f:
            lines = f.readlines()

        # Filter out comments and development dependencies
        requirements = []
        for line in lines:
            line = line.strip()
            if line and not line.startswith('#') and not any(dev in line.lower() for dev in ['pytest']):
                requirements.append(line)

        return requirements
    return []

setup(
    name="coding-analytics",
    version="1.0.0",
    author="Qualitative Analysis Team",
    author_email="dev@example.com",
    description="Analytical views over qualitative-research coding data",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Information Analysis",
        "Topic :: Text Processing :: Linguistic",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=read_requirements() or [
        "numpy>=1.24.0",
        "scikit-learn>=1.3.0",
        "pandas>=2.0.0",
        "openpyxl>=3.1.0",
        "python-dotenv>=1.0.0",
        "tqdm>=4.65.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "black>=23.0.0",
            "isort>=5.12.0",
            "mypy>=1.5.0",
        ],
        "test": [
            "pytest>=7.4.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "coding-analytics=coding_analytics.main:main",
        ],
    },
    include_package_data=True,
    keywords="qualitative analysis, coding, text analysis, tf-idf, clustering, sentiment",
)
