"""
Cookiepot
---------

Cookiepot validates cookie names, domains and paths before they are sent,
and clears a cookie under every domain and path a browser may hold it.

Logout Without Leftovers
````````````````````````

.. code:: python

    from cookiepot import Request, Response

    def logout(environ, start_response):
        response = Response('bye')
        response.deep_delete_cookie('sid', Request(environ))
        return response(environ, start_response)

"""
from setuptools import setup

test_requirements = [
    'pytest>=3.0.0',
]

setup(
    name='Cookiepot',
    version='0.1',
    license='BSD',
    description='Cookie attribute validation and deep delete for WSGI responses.',
    long_description=__doc__,
    packages=['cookiepot'],
    include_package_data=True,
    zip_safe=False,
    platforms='any',
    install_requires=[],
    extras_require={
        'test': test_requirements,
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Web Environment',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP :: WSGI',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
)
