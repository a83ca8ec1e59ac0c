"""Assembly of the WinSW service descriptor.

:py:func:`build_document` converts a :py:class:`~winsw_build.config.ServiceConfig`
into a tree of :py:mod:`~winsw_build.node` objects and
:py:func:`render_document` turns that tree into the xml file that WinSW reads
from next to its executable, e.g.:

.. code-block:: xml

   <?xml version="1.0" encoding="UTF-8"?>
   <service>
     <id>svc1</id>
     <name>My Service</name>
     <description />
     <executable>C:\\node\\node.exe</executable>
     <logmode>rotate</logmode>
     <argument>--harmony</argument>
     <argument>C:\\app\\run.js</argument>
     <workingdirectory>C:\\app</workingdirectory>
   </service>

"""

import xml.etree.ElementTree as ET

from winsw_build.config import InvalidConfigError
from winsw_build.config import LogMode
from winsw_build.config import ServiceConfig
from winsw_build.config import normalize_env
from winsw_build.config import split_dependencies
from winsw_build.config import split_flags
from winsw_build.logger import LOGGER
from winsw_build.node import Attributed
from winsw_build.node import DocumentNode
from winsw_build.node import Group
from winsw_build.node import Scalar
from winsw_build.templates import DESCRIPTOR_TEMPLATE


def build_document(
    config: ServiceConfig | None,
    runtime_executable_path: str,
    current_working_directory: str,
) -> Group:
    """Creates the ``<service>`` tree of the descriptor for ``config``.

    ``runtime_executable_path`` is the runtime that executes
    :py:attr:`~winsw_build.config.ServiceConfig.script` and
    ``current_working_directory`` is used if the configuration does not set a
    working directory.

    Raises:
        :py:class:`~winsw_build.config.InvalidConfigError`: if ``config`` is
        missing or lacks one of ``id``, ``name`` or ``script``

    """
    if not config or not config.id or not config.name or not config.script:
        raise InvalidConfigError()

    logmode = config.logmode or LogMode.ROTATE
    if not LogMode.is_known(logmode):
        LOGGER.warning("Service %s uses the unknown logmode '%s'", config.id, logmode)

    nodes: list[DocumentNode] = [
        Scalar(tag="id", text=config.id),
        Scalar(tag="name", text=config.name),
        Scalar(tag="description", text=config.description or ""),
        Scalar(tag="executable", text=runtime_executable_path),
        Scalar(tag="logmode", text=str(logmode)),
    ]

    nodes.extend(Scalar(tag="argument", text=arg) for arg in split_flags(config.flags))
    nodes.append(Scalar(tag="argument", text=config.script.strip()))

    if config.logpath:
        nodes.append(Scalar(tag="logpath", text=config.logpath))

    nodes.extend(
        Scalar(tag="depend", text=dep)
        for dep in split_dependencies(config.dependencies)
    )

    nodes.extend(
        Attributed(tag="env", attributes=[("name", env.name), ("value", env.value)])
        for env in normalize_env(config.env)
    )

    if config.logOnAs and config.logOnAs.is_complete:
        nodes.append(
            Group(
                tag="serviceaccount",
                children=[
                    Scalar(tag="domain", text=config.logOnAs.domain),
                    Scalar(tag="user", text=config.logOnAs.account),
                    Scalar(tag="password", text=config.logOnAs.password),
                ],
            )
        )

    nodes.append(
        Scalar(
            tag="workingdirectory",
            text=config.workingdirectory or current_working_directory,
        )
    )

    LOGGER.debug("Built descriptor for service %s with %d nodes", config.id, len(nodes))
    return Group(tag="service", children=nodes)


def render_document(document: Group) -> str:
    """Renders the descriptor tree as an indented xml document including the
    xml declaration.

    """
    root = document.as_xml_element()
    ET.indent(root, space=" " * 2)
    return DESCRIPTOR_TEMPLATE.render(
        service=ET.tostring(root, encoding="unicode")
    )
