from .pipe_specs import (PipeSpec, get_pipe_spec, available_schedules,
                         supported_dns)
