from setuptools import setup
import sys

if sys.version_info[0] < 3:
    print(
        """
        Sorry for the inconvenience, but language_matcher is native Python 3
        code, and you're running Python 2.
        """
    )
    sys.exit(1)


LONG_DESC = """
language_matcher measures how well one language can stand in for another,
using the Unicode CLDR's enhanced language matching rules. It can tell you
that 'zh-CN' and 'zh-Hans' are the same thing, that Hong Kong and Macao
Chinese are close, and that 'en-US' is a little closer to 'en-CA' than to
'en-GB'. Given the language a user wants and the languages you support, it
picks the best one.
"""


setup(
    name="language_matcher",
    version='1.0.0',
    license="MIT",
    platforms=["any"],
    description="Chooses the best supported language using CLDR language matching",
    long_description=LONG_DESC,
    packages=['language_matcher'],
    package_data={
        'language_matcher': ['data/cldr/supplemental/*.json'],
    },
    include_package_data=True,
    install_requires=['langcodes >= 3.0'],
    python_requires='>=3.7',
    tests_require=['pytest'],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Internationalization",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
