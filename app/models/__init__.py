from .youtube import CaptionTrack
from .api import SummarizeRequest, SummaryResult
