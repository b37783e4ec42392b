# zosmf

A Python library for the z/OSMF REST files API. It builds and sends the
requests for working with z/OS datasets: listing datasets and PDS members,
reading and writing contents, creating, copying, renaming, deleting,
migrating and recalling.

## Installation

```sh
pip install .
```

To run the tests:

```sh
pip install ".[test]"
pytest
```

## Connecting

`zosmf.client.ZOsmf` takes the server's base URL and, optionally, a
`requests.Session`. Every request is sent through that session, so
authentication, certificates and timeouts are set on the session itself:

```python
import requests

from zosmf.client import ZOsmf

password = "password"
session = requests.Session()
session.auth = ("ibmuser", password)
session.verify = "/path/to/root-ca.pem"

zosmf = ZOsmf("https://zosmf.example.com", session)
datasets = zosmf.datasets()
```

## Working with datasets

`ZOsmf.datasets()` returns a `DatasetsClient`. Its methods (`list`,
`members`, `read`, `write`, `create`, `copy`, `copy_file`, `rename`,
`delete`, `migrate`, `recall`) return builders. Chain the options you need
on a builder; each option returns a new builder and leaves the old one
unchanged. Then call `build()` to send the request and get the parsed
result, or `get_request()` to get the prepared `requests.PreparedRequest`
without sending it.

```python
# List datasets with their base attributes
listing = datasets.list("IBMUSER.CONFIG.*").attributes_base().build()
for item in listing.items:
    print(item.name, item.organization, item.volume)

# List the members of a PDS
members = datasets.members("IBMUSER.PROCLIB").build()
print([m.name for m in members.items])

# Read a PDS member, asking for its etag
member = datasets.read("SYS1.PARMLIB").member("SMFPRM00").return_etag(True).build()
print(member.data)

# Write text to the member, guarded by that etag
written = (
    datasets.write("SYS1.PARMLIB")
    .member("SMFPRM00")
    .if_match(member.etag)
    .text("new contents")
    .build()
)
print(written.etag)

# Create a sequential dataset
(
    datasets.create("IBMUSER.REST.TEST.NEWDS")
    .volume("zmf046")
    .device_type("3390")
    .organization("PS")
    .space_allocation_unit("TRK")
    .primary_space(10)
    .secondary_space(5)
    .average_block_size(500)
    .record_format("FB")
    .block_size(400)
    .record_length(80)
    .build()
)

# Copy, rename and delete
datasets.copy("MY.OLD.PDS", "MY.NEW.PDS").from_member("OLD").to_member("NEW").build()
datasets.rename("MY.OLD.DSN", "MY.NEW.DSN").build()
datasets.delete("IBMUSER.REST.TEST.PDS").member("MEMBER01").build()
```

What `build()` returns:

- `list(...)` gives a `DatasetList` whose `items` are `DatasetAttributesName`
  by default, or `DatasetAttributesBase` / `DatasetAttributesVolume` after
  `attributes_base()` / `attributes_vol()`. Volumes that the server reports
  as `*ALIAS`, `MIGRAT` or `*VSAM*` become `DatasetVolume` members.
- `members(...)` gives a `MemberList` of `MemberAttributesName`, or of
  `MemberAttributesBase` after `attributes_base()`.
- `read(...)` gives a `DatasetRead` with `data`, `etag`, `session_ref` and
  `transaction_id`. `data` is text by default and bytes after `binary()` or
  `record()`; it is `None` when `if_none_match(...)` was set and the server
  answered "304 Not Modified".
- `write(...)` gives a `DatasetWrite` with `etag` and `transaction_id`.
- `migrate(...)` gives the response's etag, or `None`.
- The other operations give the response text.

## Errors

Error responses from the server are raised as `zosmf.errors.ApiError`,
which carries `url` and `status` and, when the server sent its JSON error
document, `category`, `return_code`, `reason`, `message` and `details`;
otherwise the raw text is in `body`. A response without a transaction id
where one is required raises `MissingHeaderError`, and an unexpected value
in a response raises `InvalidValueError`. All of them derive from
`zosmf.errors.ZOsmfError`.

## What the package does not do

- There is no command-line program; the package is a library only.
- It has no login call and keeps no tokens: authentication is whatever the
  `requests.Session` you pass in does.
- The z/OS UNIX file services are not covered. `zosmf.files` holds only the
  `FileDataType` and `FileTagType` enumerations; there are no requests for
  reading, writing or managing files.