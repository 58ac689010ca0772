"""Module providing remote image class."""

import os.path


# Extensions of accepted image files. Matching is case-sensitive.
EXT_IMAGE = (".jpg", ".jpeg", ".png")


def is_image(name, extensions=EXT_IMAGE):
    """Return True if the file name ends with one of the accepted extensions.

    :param name: file name or path
    :type name: str
    :param extensions: accepted extensions (default: EXT_IMAGE)
    :type extensions: tuple of str
    :rtype: bool
    """
    return name.endswith(tuple(extensions))


class RemoteImage:
    """Image downloaded from an image source.

    Properties:
        uuid (str): Identifier of the image within the source. Typically
            the full path of the file.
        name (str): Base name of the file.
        extension (str): Lower-case extension of the file without the dot.
            Used as a hint when decoding the image.
        data (bytes): Raw content of the file.
    """

    def __init__(self, uuid, data):
        """Initialize remote image instance.

        :param uuid: identifier of the image
        :type uuid: str
        :param data: raw file content
        :type data: bytes
        """
        self._uuid = uuid
        self._data = data
        self._name = os.path.basename(uuid)

    def __repr__(self):
        return f"RemoteImage=(uuid='{self.uuid}', name={self.name}, size={len(self.data)})"

    @property
    def uuid(self):
        """Return identifier of the image.

        :return: identifier, typically the full path within the source
        :rtype: str
        """
        return self._uuid

    @property
    def name(self):
        """Return base name of the file.

        :rtype: str
        """
        return self._name

    @property
    def extension(self):
        """Return lower-case file extension without leading dot.

        :rtype: str
        """
        return os.path.splitext(self._name)[1][1:].lower()

    @property
    def data(self):
        """Return raw file content.

        :rtype: bytes
        """
        return self._data
