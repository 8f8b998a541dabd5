"""
Route Gate Decorators

``login_required`` (Flask-Login) decides Authenticated vs Unauthenticated;
``no_cache`` keeps browsers from replaying a protected page after logout.
"""

from functools import wraps

from flask import make_response

NO_CACHE_DIRECTIVES = ('no-cache, private, no-store, must-revalidate, '
                       'max-stale=0, post-check=0, pre-check=0')


def no_cache(f):
    """Mark the response, whatever it is, as not cacheable.

    Put it above ``login_required`` so the login redirect is covered too.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        response = make_response(f(*args, **kwargs))
        response.headers['Cache-Control'] = NO_CACHE_DIRECTIVES
        response.headers['Pragma'] = 'no-cache'
        response.headers['Expires'] = '0'
        return response
    return wrapper
