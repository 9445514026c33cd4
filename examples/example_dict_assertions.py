"""Demonstrates how to write dictionary assertions with dictexpect.

* Wrap a mapping with `expect(...)` and chain checks with `.and_`.
* Every assertion takes an optional reason that is appended to the failure message.
* Failures raise `AssertionFailedError`, so plain pytest functions work as-is.
"""

from dictexpect import count, count_where, expect

# =============================================================================
# Structure - size, emptiness and nullity
# =============================================================================

def test_response_headers() -> None:
    headers = {"content-type": "application/json", "content-length": "42"}

    expect(headers).not_be_null().and_.not_be_empty().and_.have_count(2)
    # Pass - two headers were returned

    expect(headers).have_count(count.between(1, 5))
    # Pass - count predicates describe themselves in failure messages

    expect(headers).have_count(count_where(lambda n: n % 2 == 0, "an even number of headers"))
    # Pass - arbitrary callables work too, with a description for the message


# =============================================================================
# Equality and containment
# =============================================================================

def test_user_profile() -> None:
    profile = {"name": "Alice", "age": 30, "roles": ["admin"]}

    expect(profile).contain_keys("name", "age").and_.not_contain_key("password")
    # Pass - sensitive fields are never serialized

    expect(profile).contain("age", 30, "the fixture user was born {0} years ago", 30)
    # Pass - the value stored under "age" matches

    expect(profile).contain_items({"name": "Alice"})
    # Pass - a subset of items is present

    expect(profile).equal({"name": "Alice", "age": 30, "roles": ["admin"]})
    # Pass - same keys and equal values


def test_profile_update_failure() -> None:
    profile = {"name": "Alice", "age": 31}

    expect(profile).equal({"name": "Alice", "age": 30}, "the update was rolled back")
    # Fail - Expected dictionary to be equal to {"name": "Alice", "age": 30} because the
    #        update was rolled back, but {"name": "Alice", "age": 31} differs at key "age".
