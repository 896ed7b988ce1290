"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='variety',
	author='Beth Kjos',
	author_email='kjosib@gmail.com',
	version='0.1.0',
	packages=['variety', ],
	license='MIT',
	description='Sum types, with case-dispatch and shared behavior, for Python',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Libraries",
    ],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	],
)
