from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from apps.plans.domain.entities import AllocationRequest
from apps.plans.domain.errors import AllocationError
from apps.plans.domain.services import DailyTargetAllocator


class Command(BaseCommand):
    help = 'Prints the daily target schedule for a goal without saving anything'

    def add_arguments(self, parser):
        parser.add_argument('total', help='Goal amount, e.g. 50000')
        parser.add_argument('start_date', help='YYYY-MM-DD')
        parser.add_argument('end_date', help='YYYY-MM-DD (inclusive)')
        parser.add_argument('--strategy', default='steady')
        parser.add_argument('--intensity', default='average')
        parser.add_argument('--weekend-rule', dest='weekend_rule', default='none')

    def handle(self, *args, **options):
        request = AllocationRequest(
            total_amount=options['total'],
            start_date=options['start_date'],
            end_date=options['end_date'],
            strategy=options['strategy'],
            intensity=options['intensity'],
            weekend_rule=options['weekend_rule'],
        )
        allocator = DailyTargetAllocator(max_days=settings.PLAN_MAX_DAYS)

        try:
            schedule = allocator.allocate(request)
        except AllocationError as e:
            raise CommandError(str(e))

        running = 0
        for day in schedule:
            running += day.target
            self.stdout.write(f"{day.date.isoformat()} {day.date.strftime('%a')}  {day.target:>8}  {running:>10}")

        self.stdout.write(self.style.SUCCESS(f'{len(schedule)} days, total {running}.'))
