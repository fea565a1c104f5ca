from ..errors import ImageNotFoundError, ImageResolutionError


def resolve_image(cloud, name: str):
    """
    Resolve an image through the cloud collaborator.
    
    Args:
        cloud: Collaborator exposing resolve_image(name)
        name: AMI ID or owner/name reference
    
    Returns:
        The resolved image; it exposes root_device_name
    
    Raises:
        ImageResolutionError: If the lookup itself fails
        ImageNotFoundError: If the lookup returns no image
    """
    try:
        image = cloud.resolve_image(name)
    except Exception as e:
        raise ImageResolutionError(name, str(e)) from e

    if image is None:
        raise ImageNotFoundError(name)
    return image
