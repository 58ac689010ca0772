"""Module providing conversion of downloaded images into displayable images."""

import io

from kivy.core.image import Image as CoreImage
from kivy.logger import Logger


def decode_image(image):
    """Decode downloaded image.

    Must be called from the main thread since textures are created on
    demand by Kivy.

    :param image: downloaded image
    :type image: imagesource.RemoteImage
    :return: decoded image
    :rtype: kivy.core.image.Image
    """
    # Kivy cannot guess the image format from an in-memory buffer. The
    # extension is passed on as a hint instead.
    return CoreImage(io.BytesIO(image.data), ext=image.extension)


def decode_images(images):
    """Decode downloaded images.

    Images which cannot be decoded are logged and skipped.

    :param images: downloaded images
    :type images: list of imagesource.RemoteImage
    :return: decoded images in the same order
    :rtype: list of kivy.core.image.Image
    """
    handles = []
    for image in images:
        try:
            handles.append(decode_image(image))
        except Exception as e:
            Logger.error(f"Content: Skipping image '{image.uuid}' which could not be decoded. {e}")
    return handles
