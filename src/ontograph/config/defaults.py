DEFAULTS = {
    "IMPLICIT_NODE_REGISTRATION": True,
    "REJECT_MULTIPLE_ROOTS": False,
    "LOADER_ID_COLUMN": "id",
    "LOADER_TAIL_COLUMN": "tail",
    "LOADER_HEAD_COLUMN": "head",
    "LOADER_LABEL_COLUMN": "label",
    "LOADER_ACCESSION_KEY": "accession",
}
