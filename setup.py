import setuptools

setuptools.setup(
	name='dripfeed',
	version='0.1.0',
	packages=[
		'dripfeed',
		'dripfeed.grammar',
		'dripfeed.matching',
		'dripfeed.support',
	],
	description='Incremental backtracking recognizer for grammars of literals, alternation, and sequence',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	extras_require={
		'testing': ['pytest'],
	},
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Compilers",
		"Development Status :: 3 - Alpha",
    ],
)
