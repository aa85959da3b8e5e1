# accessrbac

Building blocks for role-based access control:

- `accessrbac.default_role_manager.DefaultRoleManager` keeps role inheritance links in memory, optionally scoped per domain.
- `accessrbac.builtin_operators` provides the matching functions that are commonly used in policy matchers.
- `accessrbac.util` provides small helpers for matcher text and string lists.

The package has no runtime dependencies.

## Installation

```
pip install .
```

## Role inheritance

```python
from accessrbac.default_role_manager import DefaultRoleManager

rm = DefaultRoleManager(3)          # links are followed at most 3 levels deep
rm.add_link("alice", "editor")
rm.add_link("editor", "viewer")

rm.has_link("alice", "viewer")      # True
rm.has_link("alice", "alice")       # True: a name always matches itself
rm.get_roles("alice")               # ["editor"]
rm.get_users("editor")              # ["alice"]

rm.delete_link("editor", "viewer")
rm.has_link("alice", "viewer")      # False

rm.clear()                          # forget every role and link
```

`get_roles` and `get_users` return only direct links. `get_roles` returns an
empty list for an unknown name. `get_users` raises `NameNotFoundError` for
an unknown name.

### Domains

A domain can be passed as an extra positional argument to `add_link`,
`delete_link`, `has_link`, `get_roles` and `get_users`. Inside the manager
names are stored as `domain::name`, and the returned names have the prefix
removed again:

```python
rm.add_link("bob", "admin", "tenant1")
rm.has_link("bob", "admin", "tenant1")  # True
rm.has_link("bob", "admin", "tenant2")  # False
rm.get_roles("bob", "tenant1")          # ["admin"]
```

### Errors

All errors derive from `accessrbac.role_manager.RBACError`:

- `DomainParameterError`: more than one domain was passed.
- `NamesNotFoundError`: `delete_link` was called with a name that is not known.
- `NameNotFoundError`: `get_users` was called with a name that is not known.

### Pattern matching of role names

The manager can treat stored role names as patterns. To do so, install a
function that takes `(name, stored_name)` and returns a bool. Only one
function is kept, so a later call replaces the earlier one:

```python
from accessrbac.builtin_operators import key_match2

rm = DefaultRoleManager(10)
rm.add_matching_func("key_match2", key_match2)
```

### Logging

`print_roles()` writes all links in one line, such as
`u1 < g1, u4 < (g2, g3)`. The line is written at `INFO` level to the
`accessrbac.default_role_manager` logger, and only when that level is
enabled.

### Writing your own role manager

Subclass the abstract `accessrbac.role_manager.RoleManager` and implement
`clear`, `add_link`, `delete_link`, `has_link`, `get_roles`, `get_users` and
`print_roles`.

The building block of the default manager, `Role`, is also public. It has
`add_role`, `delete_role`, `has_role(name, hierarchy_level)`,
`has_direct_role` and `get_roles`.

## Matching operators

```python
from accessrbac.builtin_operators import (
    key_match, key_match2, key_match3, regex_match, ip_match,
)

key_match("/foo/bar", "/foo/*")                          # True: "*" matches any suffix
key_match2("/resource1", "/:resource")                   # True: ":name" matches one segment
key_match3("/myid/using/x", "/{id}/using/{resId}")       # True: "{name}" matches one segment
regex_match("/topic/create/123", "/topic/create")        # True: the pattern is searched for, not anchored
ip_match("192.168.2.123", "192.168.2.0/24")              # True
ip_match("192.168.2.123", "192.168.2.123")               # True
```

`ip_match` raises `ValueError` when the first argument is not an IP address,
or when the second is neither an address nor a CIDR block.

Each operator also has a `*_func(*args)` form, such as `key_match_func` and
`ip_match_func`. These forms take the first two positional arguments, which
makes them easy to register with an expression evaluator.

`generate_g_function(rm)` returns a `g(name1, name2[, domain])` callable.
When `rm` is `None`, the callable compares the two names for equality.
Otherwise it calls `rm.has_link` and returns `False` if that raises an
`RBACError`.

## Helpers

`accessrbac.util` contains:

- `escape_assertion`: turns `r.x` and `p.x` into `r_x` and `p_x`.
- `remove_comments`: strips a trailing `#` comment.
- `array_equals` and `array_2d_equals`: compare lists in order.
- `set_equals`: compares lists without regard to order.
- `array_remove_duplicates`: returns a new list with repeats removed.
- `array_to_string` and `params_to_string`: join with `", "`.
- `join_slice`: builds a list from its first argument followed by the rest.
- `set_subtract`: returns the elements of the first list that are not in the second.

## What this package does not do

This package has no enforcer. It does not read model or policy files, store
policies, or decide whether a request is allowed. It provides the role
manager and the matching functions that such an enforcer would use.

## Running the tests

```
pip install ".[test]"
pytest
```