import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="pastemyst",
    version="1.0.0",
    description="Async PasteMyst API wrapper with helpers for Discord code blocks",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=["pastemyst", "pastemyst.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    install_requires=[
        "aiohttp",
        "yarl",
        "discord.py",
        "python-dotenv",
    ],
    extras_require={
        "tests": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    python_requires=">=3.8",
)
