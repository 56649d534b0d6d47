# alabkit

A handful of small programs in two parts:

* a login system that keeps its users in a `users.json` file, with a
  prompt for signing in and a command for managing accounts;
* short demonstrations of threads, locks, read-write locks and atomic
  counters.

The package has no dependencies beyond the standard library.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## The login system

Users are stored in `users.json`. When the file does not exist it is
created with two default accounts, `admin` (an administrator) and `bob`
(a normal user), both with the password `password`. Passwords are stored
as upper-case SHA-256 hex digests, and user names are stored in lower
case.

Sign in (three attempts are allowed; the granted role, `Admin` or `User`,
is printed on success):

```
alab-login
```

Manage accounts:

```
alab-login-manager list
alab-login-manager add fred password
alab-login-manager add --admin true fred2 password
alab-login-manager delete fred
alab-login-manager change-password fred2 password
alab-login-manager --help
```

`list` prints each user's name and role. `--admin` takes `true` or
`false`; without it the new user gets the `User` role. Run with no
command, `alab-login-manager` prints a hint to use `--help`.

The same operations are available from Python, where every function
takes the path of the users file as an optional last argument:

```python
from alabkit.authentication import LoginAction, LoginRole, login

password = "password"
result = login("admin", password, "users.json")
```

`login` returns `None` for an unknown user and otherwise a `LoginAction`
whose `granted` property says whether access was granted and whose `role`
holds the `LoginRole` (`ADMIN` or `USER`). `alabkit.authentication` also
offers `User` (with `create`, `to_dict` and `from_dict`), `hash_password`,
`get_users`, `save_users`, `get_default_users` and `greet_user`.
`alabkit.login_manager` offers `add_user`, `list_users`, `delete_user` and
`change_password`, and `alabkit.login.run_login` runs the sign-in prompt
with a caller-supplied input function and output stream.

### What it does not do

The `alab-login` and `alab-login-manager` commands always use
`users.json` in the current directory; they have no option to pick
another file. Passwords are hashed without a salt, and there is no
locking of the users file against concurrent changes.

## Threading demonstrations

| Command               | What it shows                                                      |
|-----------------------|--------------------------------------------------------------------|
| `alab-hello-world`    | prints `hello_world` (`--workspace` prints `Hello, world!`)        |
| `alab-variables`      | reads a line and echoes it back as `You typed: [...]`              |
| `alab-hello`          | results of `do_math` from ten threads, printed in order            |
| `alab-divide-work`    | summing 0..4999 in chunks of 8, one thread per chunk               |
| `alab-scope-threads`  | the same sum with all workers joined at the end of a scope         |
| `alab-footgun`        | many threads incrementing one atomic counter                       |
| `alab-mutexes`        | threads appending their numbers to a list behind a lock            |
| `alab-deadlocks`      | a lock poisoned by a failing thread, and recovering its value      |
| `alab-rwlocks`        | a reader thread every 3 seconds and an interactive writer          |
| `alab-thread-builder` | starting a thread named `Named Thread`                             |

`alab-footgun` accepts `--threads` (default 1000) and `--increments`
(default 1100); `alab-mutexes` accepts `--threads` (default 10).
`alab-rwlocks` adds each line typed to the user list and stops on `q` or
at end of input.

Their building blocks can be used directly too:

* `alabkit.divide_work.chunked` and `alabkit.divide_work.threaded_sum`;
* `alabkit.scope_threads.scoped_sum`;
* `alabkit.hello.do_math` and `alabkit.hello.run_threads`;
* `alabkit.footgun.AtomicCounter` (`fetch_add`, `load`) and
  `alabkit.footgun.count_concurrently`;
* `alabkit.mutexes.collect_numbers`;
* `alabkit.deadlocks.SharedValue` (`lock`, `try_lock`, `into_inner`),
  which raises `alabkit.deadlocks.PoisonError` once a holder has failed;
  the error's `into_inner` still returns the data;
* `alabkit.rwlocks.ReadWriteLock`, whose `read` and `write` are context
  managers;
* `alabkit.thread_builder.spawn_named`.