# segmentation/morphology.py
import cv2

KERNEL_SIZE = 3
CLOSE_ITERS = 20
OPEN_ITERS = 6


def structuring_element(size: int = KERNEL_SIZE):
    return cv2.getStructuringElement(cv2.MORPH_ELLIPSE, (size, size))


def clean_mask(mask, kernel_size: int = KERNEL_SIZE,
               close_iters: int = CLOSE_ITERS, open_iters: int = OPEN_ITERS):
    """
    Close (fill gaps, reconnect fragments) then open (drop specks and thin
    spurs) with the same elliptical element. Closing runs more iterations
    than opening so a broken-up object is rejoined before residue is trimmed.
    """
    if mask.ndim != 2:
        raise ValueError(f"Expected a 2-D mask, got shape {mask.shape}")
    if close_iters < 0 or open_iters < 0:
        raise ValueError(f"Iteration counts must be >= 0, got close={close_iters} open={open_iters}")

    k = structuring_element(kernel_size)
    out = mask
    if close_iters:
        out = cv2.morphologyEx(out, cv2.MORPH_CLOSE, k, iterations=close_iters)
    if open_iters:
        out = cv2.morphologyEx(out, cv2.MORPH_OPEN, k, iterations=open_iters)
    return out.copy() if out is mask else out


def clean_mask_from_cfg(mask, cfg):
    m = cfg["morphology"]
    return clean_mask(mask,
                      kernel_size=int(m.get("kernel_size", KERNEL_SIZE)),
                      close_iters=int(m.get("close_iters", CLOSE_ITERS)),
                      open_iters=int(m.get("open_iters", OPEN_ITERS)))
